"""All magic values live here — no inline literals anywhere else."""

# Telegram typing indicator re-send interval (seconds).
# The TYPING action expires after ~5 s, so we refresh every 4 s.
TELEGRAM_TYPING_INTERVAL: float = 4.0

# Data URI decoding
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"
DATA_URI_PAYLOAD_SEPARATOR = ","
IMAGE_MIME_PREFIX = "image/"

# Structured output
JSON_MIME_TYPE = "application/json"
ANALYSIS_TEMPERATURE: float = 0.4
ANALYSIS_SCHEMA_NAME = "disease_analysis"
ANALYSIS_INSTRUCTION = (
    "You are an expert plant pathologist. Analyze this image. "
    "If it is not a plant, set isPlant to false and leave other fields empty or generic. "
    "If it is a plant, identify it, detect any diseases, and provide detailed treatments. "
    "Return the result in JSON format."
)
HEALTHY_MARKER = "healthy"

# Vision backends
PROVIDER_GEMINI = "gemini"
PROVIDER_OPENAI = "openai"
PROVIDER_CLAUDE = "claude"
VISION_PROVIDERS = (PROVIDER_GEMINI, PROVIDER_OPENAI, PROVIDER_CLAUDE)
GEMINI_VISION_MODEL = "gemini-2.5-flash"
OPENAI_VISION_MODEL = "gpt-4o"
CLAUDE_VISION_MODEL = "claude-opus-4-6"
CLAUDE_MAX_TOKENS = 2048
CLAUDE_TOOL_USE = "tool_use"
CLAUDE_TOOL_DESCRIPTION = "Record the plant disease analysis."

# Adapter failure messages (logged, never shown verbatim to users)
MSG_ERR_TRANSPORT = "Vision service call failed: %s"
MSG_ERR_EMPTY_RESPONSE = "No response from the vision service"
MSG_ERR_MALFORMED_RESPONSE = "Vision service response does not match the analysis schema (%d validation errors)"

# Log messages
MSG_BOT_STARTING = "Starting FloraDoc bot…"
MSG_BACKEND_SELECTED = "Vision backend: %s (%s)"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_ANALYSIS_IN_FLIGHT = "Analysis already in flight for %s"
MSG_ANALYSIS_OK = "✓ %s — %s (%s%%)"
MSG_ANALYSIS_NOT_PLANT = "✓ No plant detected in image"
MSG_ANALYSIS_FAILED = "✗ Analysis failed [%s]: %s"
MSG_SEND_OK = "✓ Sent (%.1fs)"
MSG_SEND_FAIL = "✗ Send failed (%.1fs)"

# User-facing replies
MSG_GENERIC_FAILURE = "Failed to analyze image. Please try again."
MSG_RETRY_HINT = "Send another photo, or /new to start over."
MSG_ANALYSIS_BUSY = "Still analyzing your last photo — hang on a moment."
MSG_NOT_A_PLANT = (
    "No plant detected\n"
    "Our AI couldn't detect a plant in this image. "
    "Please upload a clear photo of a leaf or plant."
)
MSG_SEND_PHOTO = "Send me a photo of a leaf or plant and I'll diagnose it."
MSG_UNSUPPORTED_FILE = "That file is not an image. Please send a JPG or PNG photo."
MSG_DISCLAIMER = (
    "Results are for informational purposes only. "
    "Consult a professional botanist for critical agricultural decisions."
)

# Result layout
RESULT_HEADER = "🌿 %s"
RESULT_CONDITION = "Condition: %s (%s%% confidence)"
SECTION_SYMPTOMS = "Symptoms"
SECTION_CAUSES = "Causes"
SECTION_TREATMENT = "Treatment plan"
SECTION_ORGANIC = "Organic"
SECTION_CHEMICAL = "Chemical"
SECTION_PREVENTION = "Prevention"
BULLET = "• "

# Commands
CMD_START = "start"
CMD_HELP = "help"
CMD_NEW = "new"
CMD_STATUS = "status"
MSG_NEW_SESSION = "Cleared — send a new photo whenever you're ready."
MSG_STATUS = (
    "Status\n"
    "  Vision backend : %s\n"
    "  Model          : %s\n"
    "  Schema         : v%s\n"
    "  This chat      : %s\n"
)
STATUS_IDLE = "idle"
STATUS_ANALYZING = "analyzing…"
STATUS_LAST_RESULT = "last result: %s"
STATUS_LAST_NOT_PLANT = "last result: no plant detected"
STATUS_LAST_ERROR = "last analysis failed"

MSG_HELP = (
    "FloraDoc — plant disease diagnosis on Telegram\n"
    "\n"
    "Send a photo of a sick plant or leaf (or an image file) and get:\n"
    "  • the plant and its condition, with a confidence score\n"
    "  • symptoms and likely causes\n"
    "  • organic and chemical treatments\n"
    "  • prevention tips\n"
    "\n"
    "Commands:\n"
    "  /help    — show this message\n"
    "  /status  — backend and this chat's state\n"
    "  /new     — discard the last result and start over\n"
)
