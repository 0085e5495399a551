#!/usr/bin/env python3
"""Benchmark script for pactreport performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import tempfile
import time
from pathlib import Path


def benchmark_import_time() -> float:
    """Measure import time of pactreport package."""
    start = time.perf_counter()
    import pactreport  # noqa: F401

    return time.perf_counter() - start


def benchmark_build_report(interactions: int) -> float:
    """Measure building one consumer execution with failing interactions."""
    from pactreport.application.reporters.json_reporter import JsonReporter
    from pactreport.domain.model.configuration import ReporterConfig
    from pactreport.domain.model.details import MismatchDetail
    from pactreport.domain.model.inputs import ConsumerInfo, Interaction, ProviderInfo

    with tempfile.TemporaryDirectory() as tmp:
        reporter = JsonReporter(ReporterConfig(report_dir=Path(tmp)))
        start = time.perf_counter()
        reporter.initialise(ProviderInfo("BenchProvider"))
        reporter.start_consumer_execution(ConsumerInfo("BenchConsumer"))
        for i in range(interactions):
            reporter.record_interaction_description(Interaction(f"request {i}"))
            reporter.record_status_comparison(200, False, MismatchDetail("expected 200 but was 500"))
            reporter.record_header_comparison("Content-Type", ["application/json"], False)
        return time.perf_counter() - start


def benchmark_merge_runs(runs: int) -> float:
    """Measure repeated finalize() merging into one report file."""
    from pactreport.application.reporters.json_reporter import JsonReporter
    from pactreport.domain.model.configuration import ReporterConfig
    from pactreport.domain.model.inputs import ConsumerInfo, Interaction, ProviderInfo

    with tempfile.TemporaryDirectory() as tmp:
        reporter = JsonReporter(ReporterConfig(report_dir=Path(tmp)))
        start = time.perf_counter()
        for _ in range(runs):
            reporter.initialise(ProviderInfo("BenchProvider"))
            reporter.start_consumer_execution(ConsumerInfo("BenchConsumer"))
            reporter.record_interaction_description(Interaction("a request"))
            reporter.finalize()
        return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run pactreport benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    # Event handling
    build_time = benchmark_build_report(1000)
    results.append(
        {
            "name": "Build Report (1k failing interactions)",
            "unit": "seconds",
            "value": build_time,
        }
    )

    # Merge-on-write
    merge_time = benchmark_merge_runs(100)
    results.append(
        {
            "name": "Merge Runs (100 finalize calls)",
            "unit": "seconds",
            "value": merge_time,
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
