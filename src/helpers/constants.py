"""Common configuration constants used across the application."""

# Scan window
FROM_SLOT = 327_600
"""First slot of the scan and filter window (inclusive)"""

TO_SLOT = 442_799
"""Last slot of the scan and filter window (inclusive)"""

GRAFFITI_PATTERN = "dappnode"
"""Regular expression matched case-insensitively against block graffiti"""

# File paths
RECORD_FILE = "block-record.csv"
"""Append-only log of scanned blocks"""

INDEXES_OUTPUT = "validatorIndexes.txt"
"""Matched proposer indexes, one per line"""

ADDRESSES_OUTPUT = "addresses.txt"
"""Unique deposit funding addresses, one per line"""

# API endpoints
BEACON_NODE_URL = "http://172.33.0.12:3500"
"""Prysm beacon node serving the v1alpha1 API"""

BEACONCHAIN_URL = "https://beaconcha.in"
"""beaconcha.in explorer"""

# Explorer limits
DEPOSITS_BATCH_SIZE = 100
"""Maximum validator indexes per beaconcha.in deposits request"""

MIN_DEPOSIT_GWEI = 32_000_000_000
"""Smallest deposit amount (gwei) that counts as a full validator deposit"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""


__all__ = [
    "ADDRESSES_OUTPUT",
    "BEACONCHAIN_URL",
    "BEACON_NODE_URL",
    "DEFAULT_TIMEOUT",
    "DEPOSITS_BATCH_SIZE",
    "FROM_SLOT",
    "GRAFFITI_PATTERN",
    "INDEXES_OUTPUT",
    "MIN_DEPOSIT_GWEI",
    "RECORD_FILE",
    "TO_SLOT",
]
