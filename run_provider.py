#!/usr/bin/env python3
"""
provider-linux

Main executable entry point for the Linux security provider.
This script runs the CLI and exits with appropriate status codes.

Usage:
    ./run_provider.py [options]
    python3 run_provider.py [options]

Exit Codes:
    0 - Success, all checks passed
    1 - Error occurred during execution
    2 - At least one check failed or an artifact could not be read

Examples:
    # Audit the live system
    sudo ./run_provider.py

    # Audit copies of the artifacts
    ./run_provider.py --ssh-config ./sshd_config --ip-forward ./ip_forward

    # JSON report to a file
    sudo ./run_provider.py --format json --pretty -o report.json
"""

import sys
from provider_linux.cli import main

if __name__ == "__main__":
    sys.exit(main())
