#!/usr/bin/env python3
"""YAML-driven analysis example.

Loads a graph configuration, runs CycleAnalyzer and prints the report.

Run this example:
    python examples/analyze_config.py
"""

import logging

from cyclegraph import ConfigLoader, CycleAnalyzer

CONFIG = """
name: "Package imports"
graph:
  settings:
    max_cycles: 3
    on_truncation: warn
  nodes: [a, b, c, d]
  edges:
    - {source: a, target: b}
    - {source: b, target: a}
    - {source: b, target: c}
    - {source: c, target: b}
    - {source: c, target: d}
    - {source: d, target: c}
    - {source: d, target: a}
    - {source: a, target: d}
"""


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")

    config = ConfigLoader.loads(CONFIG)
    analyzer = CycleAnalyzer.from_config(config)
    report = analyzer.analyze()

    print(f"Graph: {config.name}")
    print(f"Cyclic components: {report.scc.cycle_count}")
    print(f"Cycles returned: {report.enumeration.count}")
    print(f"Truncated: {report.enumeration.truncated}")
    for cycle in report.with_labels(analyzer.graph)["enumeration"]["cycles"]:
        print("  " + " -> ".join(cycle + cycle[:1]))


if __name__ == "__main__":
    main()
