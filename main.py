"""
Main entrypoint: answer one health check for the local Galera node.

Intended as an xinetd service or HAProxy external check: reads nothing from
stdin, writes a single HTTP/1.1 response (200 or 503) to stdout, and exits 0,
or 1 when the database server process is not running, or 2 on configuration
errors.

Env: CLUSTERCHECK_MYSQL_HOST, CLUSTERCHECK_MYSQL_PORT, CLUSTERCHECK_MYSQL_USER,
CLUSTERCHECK_MYSQL_PASSWORD, CLUSTERCHECK_INI_FILE, LOG_LEVEL, LOG_FORMAT, LOG_FILE, etc.

Installed console script: clustercheck [-u USER -p PASSWORD] [-i INI_FILE]
"""

import sys

# Configure structured logging before other imports that may log
import clustercheck.check_logging  # noqa: F401
from clustercheck.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
