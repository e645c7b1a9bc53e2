__version__ = "0.1.0"
COMMIT = "none"
BUILD_DATE = "unknown"
