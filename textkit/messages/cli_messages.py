# textkit/messages/cli_messages.py

# ✅ Positive
LOGGING_INITIALIZED = "✅ Logging system initialized"
COMMAND_DONE = "✅ Command {command} completed in {elapsed:.4f}s"

# ❌ Errors
COMMAND_FAILED = "❌ Command {command} failed: {error}"
NO_INPUT = "No input text given and stdin is a terminal."
INVALID_LOG_LEVEL = "Unknown log level {value!r}. Available: {available}."
