import os
from pathlib import Path


# GitHub Actions reads step outputs from the file named in $GITHUB_OUTPUT
def set_output(name: str, value: str) -> None:
    output_file = os.getenv("GITHUB_OUTPUT")
    if not output_file:
        print(f"{name}={value}")
        return
    with Path(output_file).open("a", encoding="utf-8") as fh:
        fh.write(f"{name}={value}\n")


def warning(message: str) -> None:
    print(f"::warning::{message}")


def error(message: str) -> None:
    print(f"::error::{message}")
