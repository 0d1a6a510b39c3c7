# textkit/messages/transform_messages.py

# ❌ Config errors
INVALID_TOKEN_CASE = "Unknown token case rule: {value!r}."
INVALID_SEPARATOR = "Join separator must be a string, got {type_name}."
INVALID_PAD_POSITION = "Unknown pad position: {value!r}."
INVALID_PAD_PATTERN = "Pad pattern must be a string, got {type_name}."
INVALID_PAD_SIZE = "Pad target size must be an integer, got {type_name}."
INVALID_CONTINUATION = "Continuation characters must be single characters: {value!r}."
UNKNOWN_STYLE = "Unknown case style {style!r}. Available: {available}."

# ⚠️ Fallbacks
EMPTY_SEPARATOR = "split_ex called with an empty separator; returning no segments."
EMPTY_PAD_PATTERN = "Pad pattern is empty; returning source unchanged."
DELIMITER_NOT_FOUND = "Delimiter {delim!r} not found; returning source unchanged."
