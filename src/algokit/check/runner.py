"""
Sweep runner: verifies every configured algorithm from a YAML config.

Usage (from repo root):
    algokit-check configs/smoke.yaml
    python -m algokit.check.runner configs/smoke.yaml --log-level DEBUG

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per check
    - summary.csv             # checks / passed / failed / errors per (algo, order)
    - (console) rich summary table + tqdm progress

Design notes:
- For each size n and repeat we generate ONE dataset and give the same input
  to every algorithm under every order.
- Linear search is checked on the same dataset for one present and one
  absent target; the binary adder gets its own random operands per width.
- If an algorithm raises, it is skipped for the rest of the sweep (remaining
  repeats at that size and all larger sizes).
- Correctness only: nothing is timed.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.table import Table
from tqdm import tqdm

from algokit import __version__
from algokit.algorithms import get_sort
from algokit.check.harness import check_add_call, check_search_call, check_sort_call
from algokit.datasets import make_bits, make_dataset
from algokit.log import console, get_logger, setup_logging
from algokit.ordering import SortOrder

logger = get_logger(__name__)

REQUIRED_KEYS = ["experiment_name", "output_dir", "seed", "dataset", "sizes", "algorithms"]
SUMMARY_COLUMNS = ["algo", "order", "checks", "passed", "failed", "errors", "max_n"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S_%f")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "algokit": __version__,
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Any]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if isinstance(entry, str):
            entry = {"name": entry}
        if not isinstance(entry, dict):
            raise ValueError(f"Algorithm entries must be names or mappings; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(name=name, sort_fn=get_sort(name), config=config))
    return specs


def _resolve_sizes(raw: Any) -> List[int]:
    if not isinstance(raw, list) or not raw:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    sizes = []
    for n in raw:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"Config 'sizes' entries must be nonnegative integers; got {n!r}")
        sizes.append(n)
    return sizes


def _resolve_orders(raw: Any) -> List[SortOrder]:
    if raw is None:
        return [SortOrder.NONDECREASING, SortOrder.NONINCREASING]
    if not isinstance(raw, list) or not raw:
        raise ValueError("Config 'orders' must be a non-empty list of order names")
    return [SortOrder.parse(o) for o in raw]


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists() or jsonl_path.stat().st_size == 0:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    df["passed"] = df["status"] == "ok"
    df["failed"] = df["status"] == "mismatch"
    df["errors"] = df["status"] == "error"

    out = df.groupby(["algo", "order"], as_index=False).agg(
        checks=("status", "count"),
        passed=("passed", "sum"),
        failed=("failed", "sum"),
        errors=("errors", "sum"),
        max_n=("n", "max"),
    )
    out[["checks", "passed", "failed", "errors", "max_n"]] = out[
        ["checks", "passed", "failed", "errors", "max_n"]
    ].astype("int64")
    return out.sort_values(["algo", "order"], ignore_index=True)


def _print_rich_summary(summary: pd.DataFrame) -> None:
    table = Table(title="Verification Summary")
    table.add_column("Algorithm", style="bold")
    table.add_column("Order")
    for hdr in ("Checks", "Passed", "Failed", "Errors", "max n"):
        table.add_column(hdr, justify="right")

    if summary.empty:
        table.add_row("(no checks)", "—", "—", "—", "—", "—", "—")
    for row in summary.itertuples(index=False):
        bad = row.failed + row.errors
        style = "green" if bad == 0 else "red"
        table.add_row(
            f"[{style}]{row.algo}[/]",
            str(row.order),
            str(row.checks),
            str(row.passed),
            str(row.failed),
            str(row.errors),
            str(row.max_n),
        )
    console.print()
    console.print(table)
    console.print()


# ------------------------- core runner ------------------------- #

def run_sweep(config_path: Path) -> Path:
    """Run one verification sweep and return the run directory."""
    cfg = _load_yaml(Path(config_path))

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes = _resolve_sizes(cfg["sizes"])
    orders = _resolve_orders(cfg.get("orders"))
    repeats = int(cfg.get("repeats", 1))
    if repeats < 1:
        raise ValueError("Config 'repeats' must be >= 1")
    check_search = bool(cfg.get("search", True))
    add_cfg: Dict[str, Any] = dict(cfg.get("binary_add") or {})
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])

    # Resolve algorithms before touching the filesystem
    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    per_algo_skip = {a.name: False for a in algos}

    console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    console.print(f"[bold]Orders:[/bold] {', '.join(o.value for o in orders)}")

    dist = dataset_spec.get("dist")
    for n in tqdm(sizes, desc="Sizes", unit="n"):
        for trial in range(repeats):
            base_a = make_dataset(n, dataset_spec, rng)

            for a_spec in algos:
                if per_algo_skip[a_spec.name]:
                    continue
                for order in orders:
                    rec = check_sort_call(
                        algo_name=a_spec.name,
                        algo_fn=a_spec.sort_fn,
                        a=base_a,
                        order=order,
                        config=a_spec.config,
                    )
                    _append_jsonl({**rec, "trial": trial, "dist": dist}, results_path)
                    if rec["status"] == "error":
                        logger.info("Skipping %s for the rest of the sweep after n=%d", a_spec.name, n)
                        per_algo_skip[a_spec.name] = True

            if check_search:
                targets = [max(base_a) + 1 if base_a else 0]
                if base_a:
                    targets.insert(0, base_a[int(rng.integers(0, len(base_a)))])
                for item in targets:
                    rec = check_search_call(a=base_a, item=item)
                    _append_jsonl({**rec, "trial": trial, "dist": dist}, results_path)

    widths = list(add_cfg.get("widths", []))
    samples = int(add_cfg.get("samples", 1))
    for width in widths:
        for trial in range(samples):
            rec = check_add_call(a=make_bits(width, rng), b=make_bits(width, rng))
            _append_jsonl({**rec, "trial": trial, "dist": "bits"}, results_path)

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_rich_summary(summary_df)

    console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        console.print(f" - {path}")

    return run_dir


def count_failures(run_dir: Path) -> int:
    """Number of failed or errored checks recorded in a run directory."""
    summary = _aggregate_summary(Path(run_dir) / "results.jsonl")
    if summary.empty:
        return 0
    return int(summary["failed"].sum() + summary["errors"].sum())


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run an algorithm verification sweep from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML sweep config")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_dir = run_sweep(config_path)
    except Exception as e:
        console.print(f"[bold red]Sweep failed:[/bold red] {e!r}")
        raise

    failures = count_failures(run_dir)
    if failures:
        console.print(f"[bold red]{failures} check(s) failed.[/bold red]")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
