#!/usr/bin/env python3
"""
Log Line Parsing Example

Builds a pipeline once and runs it over every line of a log file, turning
lines like

    2022-11-19T17:34:05.299295Z  25888 INFO loading configuration from ./config.yml

into records. Blank lines are dropped by the pipeline itself.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from tinypipe import Pipeline, build_config, configure_logging
from tinypipe.steps import strip, reject_empty, split_space_max

console = Console()


def build_record(fields: list[str]) -> Optional[dict[str, Any]]:
    """Turn the four split fields into a record, None for malformed lines"""
    if len(fields) < 4 or not fields[1].isdigit():
        return None
    return {
        "timestamp": datetime.fromisoformat(fields[0].replace("Z", "+00:00")),
        "process_id": int(fields[1]),
        "log_level": fields[2].lower(),
        "log_line": fields[3],
    }


LOG_LINE = Pipeline([strip, reject_empty, split_space_max(4), build_record], name="log-line")


def main(
    log_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Log file to parse"),
    level: Optional[str] = typer.Option(None, "--level", "-l", help="Only show this log level"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Parse a log file into records and print them as a table"""
    
    config = build_config({"log": {"level": "DEBUG"}} if verbose else None)
    configure_logging(config["log"])
    
    table = Table(title=f"Records from {log_file.name}")
    table.add_column("Timestamp", style="cyan")
    table.add_column("PID", justify="right")
    table.add_column("Level", style="magenta")
    table.add_column("Message")
    
    with open(log_file, "r", encoding="utf-8") as f:
        for record in LOG_LINE.run_all(f, drop_absent=True):
            if level and record["log_level"] != level.lower():
                continue
            table.add_row(
                record["timestamp"].isoformat(),
                str(record["process_id"]),
                record["log_level"],
                record["log_line"],
            )
    
    console.print(table)


if __name__ == "__main__":
    typer.run(main)
