"""Response schema contract sent to every vision backend.

One JSON-Schema document, versioned here. Backends translate it into their
provider's structured-output mechanism; the adapter validates replies against
the matching pydantic models in `floradoc.models`.
"""

SCHEMA_VERSION = "1"

REQUIRED_FIELDS = ("isPlant", "plantName", "condition", "confidence", "symptoms", "treatments")


def _string_list(description: str) -> dict:
    return {"type": "array", "items": {"type": "string"}, "description": description}


ANALYSIS_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "isPlant": {
            "type": "boolean",
            "description": "True if the image contains a plant or leaf, false otherwise.",
        },
        "plantName": {
            "type": "string",
            "description": "Common name of the plant identified.",
        },
        "condition": {
            "type": "string",
            "description": "The name of the disease detected, or 'Healthy' if no disease is found.",
        },
        "confidence": {
            "type": "number",
            "description": "Confidence score of the diagnosis from 0 to 100.",
        },
        "description": {
            "type": "string",
            "description": "A brief summary of the condition.",
        },
        "symptoms": _string_list("List of visual symptoms identified."),
        "causes": _string_list("Potential causes of the disease (fungal, bacterial, pests, etc.)."),
        "treatments": {
            "type": "object",
            "properties": {
                "organic": _string_list("Organic or home remedies."),
                "chemical": _string_list("Chemical fungicides or pesticides."),
            },
            "required": ["organic", "chemical"],
        },
        "prevention": _string_list("Steps to prevent future outbreaks."),
    },
    "required": list(REQUIRED_FIELDS),
}
