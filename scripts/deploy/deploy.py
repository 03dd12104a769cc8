#!/usr/bin/env python3
"""Deployment script for the earthquake trends CDK application."""

import argparse
import os
import shlex
import subprocess
import sys
from typing import Callable, Mapping, Optional, Sequence

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def run_command(
    command: Sequence[str], *, check: bool = True, env: Optional[Mapping[str, str]] = None
) -> subprocess.CompletedProcess[str]:
    """Execute a subprocess without shell interpolation."""

    printable = " ".join(shlex.quote(part) for part in command)
    print(f"Running: {printable}")

    result = subprocess.run(command, capture_output=True, text=True, env=env, check=False)

    if check and result.returncode != 0:
        print(f"Command failed with return code {result.returncode}")
        if result.stdout:
            print(f"stdout: {result.stdout}")
        if result.stderr:
            print(f"stderr: {result.stderr}")
        sys.exit(result.returncode)

    return result


def deploy_stack(
    branch_name: str,
    *,
    require_approval: str = "never",
    runner: Runner = run_command,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Deploy the stack for ``branch_name``."""
    base_env = dict(os.environ if environ is None else environ)
    if not base_env.get("DATADOG_API_KEY"):
        print("Missing required environment variable: DATADOG_API_KEY")
        sys.exit(1)

    print(f"Deploying branch: {branch_name}")
    exec_env = {**base_env, "BRANCH_NAME": branch_name}

    deploy_cmd = [
        "cdk",
        "deploy",
        f"earthquake-trends-{branch_name}",
        "--require-approval",
        require_approval,
    ]
    runner(deploy_cmd, env=exec_env)
    print(f"Deployment of {branch_name} completed successfully!")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main deployment function."""
    parser = argparse.ArgumentParser(description="Deploy the earthquake trends CDK stack")
    parser.add_argument(
        "--branch", "-b", default=os.environ.get("BRANCH_NAME") or "main", help="Branch (deployment) name"
    )
    parser.add_argument(
        "--require-approval",
        choices=["never", "any-change", "broadening"],
        default="never",
        help="CDK approval level",
    )

    args = parser.parse_args(argv)

    deploy_stack(args.branch, require_approval=args.require_approval)


if __name__ == "__main__":
    main()
