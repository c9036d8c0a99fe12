"""Protocol limits and ingest API constants"""

# Default local agent endpoint metrics can be exported to
DEFAULT_ONEAGENT_ENDPOINT = "http://localhost:14499/metrics/ingest"

# Maximum number of lines per ingest request
PAYLOAD_LINES_LIMIT = 1000

# Per-line limits
MAX_LINE_LENGTH = 2000
MAX_DIMENSIONS = 50

# Applied before escaping
MAX_METRIC_KEY_LENGTH = 250
MAX_DIMENSION_KEY_LENGTH = 100
MAX_DIMENSION_VALUE_LENGTH = 250

METRICS_SOURCE_DIMENSION = "dt.metrics.source"

# Only one out of this many invalid timestamp warnings is logged
TIMESTAMP_WARNING_THROTTLE_FACTOR = 1000
