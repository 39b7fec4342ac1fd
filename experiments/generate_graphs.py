#!/usr/bin/env python3
"""
Batch Graph Generation Runner
=============================

This script runs the generator configurations listed in
``config/generators.yaml`` and writes every graph as an SMAT file, plus a
JSON summary of vertex and edge counts.

Usage:
    python generate_graphs.py [--config NAME] [--output OUTPUT] [--only RUN ...]
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import load_generator_config
from sparsegen.config import DEFAULT_OUTPUT_DIR, RANDOM_SEED, SMAT_SUFFIX
from sparsegen.data import load_matrix_network, write_smat
from sparsegen.errors import GraphGenerationError
from sparsegen.generators import GENERATORS
from sparsegen.network import MatrixNetwork

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate synthetic sparse graphs from a YAML run list"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="generators",
        help="Configuration name under config/ (default: generators)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for SMAT files (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--only",
        type=str,
        nargs="+",
        default=None,
        help="Run only the named configurations (seed graphs are built as needed)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help=f"Seed for runs that do not set one (default: {RANDOM_SEED})",
    )
    return parser.parse_args(argv)


def run_generator(
    run: Dict[str, Any],
    built: Dict[str, MatrixNetwork],
    default_seed: int,
) -> MatrixNetwork:
    """Run a single configured generator."""
    name = run["name"]
    generator = run["generator"]
    if generator not in GENERATORS:
        raise ValueError(f"Run {name!r}: unknown generator {generator!r}")

    params = dict(run.get("params", {}))
    if generator == "partial_duplication":
        if "seed_graph" in run:
            source = run["seed_graph"]
            if source not in built:
                raise ValueError(f"Run {name!r}: seed graph {source!r} has not been generated")
            params["A"] = built[source]
        elif "seed_graph_file" in run:
            params["A"] = load_matrix_network(run["seed_graph_file"])
        else:
            raise ValueError(f"Run {name!r}: partial_duplication needs seed_graph or seed_graph_file")

    # havel_hakimi_graph is deterministic and takes no random source
    if generator != "havel_hakimi_graph":
        params["seed"] = run.get("seed", default_seed)

    return GENERATORS[generator](**params)


def select_runs(runs: List[Dict[str, Any]], only: Optional[List[str]]) -> List[Dict[str, Any]]:
    """Restrict runs to ``only`` plus the seed graphs they depend on, keeping order."""
    if only is None:
        return runs

    by_name = {run["name"]: run for run in runs}
    unknown = [name for name in only if name not in by_name]
    if unknown:
        raise ValueError(f"Unknown runs: {unknown}")

    wanted = set()
    pending = list(only)
    while pending:
        name = pending.pop()
        if name in wanted:
            continue
        wanted.add(name)
        dependency = by_name[name].get("seed_graph")
        if dependency is not None:
            pending.append(dependency)

    return [run for run in runs if run["name"] in wanted]


def save_summary(summary: List[Dict[str, Any]], output_dir: Path) -> Path:
    """Save the run summary as JSON."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    json_path = output_dir / f"summary_{timestamp}.json"
    with open(json_path, "w") as f:
        json.dump(summary, f, indent=2)
    logger.info(f"Saved summary to {json_path}")
    return json_path


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    runs = select_runs(load_generator_config(args.config), args.only)
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    built: Dict[str, MatrixNetwork] = {}
    summary = []
    failures = 0

    for run in runs:
        name = run["name"]
        logger.info(f"Running {name} ({run['generator']})")
        try:
            A = run_generator(run, built, args.seed)
        except GraphGenerationError as e:
            logger.error(f"Run {name} failed: {e}")
            failures += 1
            summary.append({"name": name, "generator": run["generator"], "error": str(e)})
            continue

        built[name] = A
        path = write_smat(A, output_dir / f"{name}{SMAT_SUFFIX}")
        summary.append({
            "name": name,
            "generator": run["generator"],
            "n": A.n,
            "nnz": A.nnz,
            "undirected": A.is_undirected,
            "file": str(path),
        })

    save_summary(summary, output_dir)
    logger.info(f"Finished {len(runs)} runs with {failures} failures")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
