"""Domain model: report tree, verifier inputs, comparison details."""

from pactreport.domain.model.configuration import ReporterConfig
from pactreport.domain.model.details import (
    BodyComparisonResult,
    BodyMismatch,
    BodyOutcome,
    BodyTypeMismatch,
    ComparisonDetail,
    DetailList,
    HeaderMismatch,
    MismatchDetail,
    RawValue,
)
from pactreport.domain.model.inputs import (
    ConsumerInfo,
    DescribedSource,
    FileSource,
    Interaction,
    PactSource,
    ProviderInfo,
    ProviderState,
    UrlSource,
    VerificationNotice,
)
from pactreport.domain.model.report import (
    REPORT_FORMAT,
    ConsumerRecord,
    ExecutionRecord,
    InteractionRecord,
    LoadFailure,
    MetaData,
    Report,
)
from pactreport.domain.model.verification import (
    Cause,
    ExceptionDetail,
    VerificationFailed,
    VerificationOk,
    VerificationOutcome,
)

__all__ = [
    "REPORT_FORMAT",
    "BodyComparisonResult",
    "BodyMismatch",
    "BodyOutcome",
    "BodyTypeMismatch",
    "Cause",
    "ComparisonDetail",
    "ConsumerInfo",
    "ConsumerRecord",
    "DescribedSource",
    "DetailList",
    "ExceptionDetail",
    "ExecutionRecord",
    "FileSource",
    "HeaderMismatch",
    "Interaction",
    "InteractionRecord",
    "LoadFailure",
    "MetaData",
    "MismatchDetail",
    "PactSource",
    "ProviderInfo",
    "ProviderState",
    "RawValue",
    "Report",
    "ReporterConfig",
    "UrlSource",
    "VerificationFailed",
    "VerificationNotice",
    "VerificationOk",
    "VerificationOutcome",
]
