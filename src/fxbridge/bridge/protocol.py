PROTOCOL_VERSION = "1.0"

ERROR_CODES = {
    "ERROR": 1,
    "INVALID_INPUT": 2,
    "NOT_FOUND": 3,
    "NO_CONTEXT": 4,
    "NO_SELECTION": 5,
    "HOST_ERROR": 6,
    "UNKNOWN_HOST": 7,
    "NO_PROJECT": 8,
}
