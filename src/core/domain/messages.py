"""Textos fijos visibles para el usuario.

Son parte del contrato "degradar, no fallar": cada etapa que falla devuelve
uno de estos valores en lugar de propagar un error.
"""

from __future__ import annotations

NO_AI_RESPONSE = "No response from AI."

INVALID_IMAGE_FORMAT = "Invalid image format. Please upload a valid image."
NO_LANDMARK_DETECTED = "❌ No recognizable landmark detected."

WIKIPEDIA_NO_DETAILS = "Wikipedia has no details on this topic."
WIKIPEDIA_ERROR = "Error retrieving Wikipedia information."

REFINE_EMPTY = "No refined information available."
REFINE_ERROR = "Error refining Wikipedia data."

RECOMMENDATIONS_EMPTY = "No travel recommendations available."
RECOMMENDATIONS_ERROR = "Error generating travel recommendations."

CATEGORY_EMPTY = "No information available for this category."
CATEGORY_ERROR = "Error generating category information."

KNOWLEDGE_ERROR = "Error retrieving or processing Wikipedia information."
IMAGE_ERROR_PREFIX = "Error processing image:"

ITINERARY_EMPTY = "No itinerary generated."
ITINERARY_FAILED = "Failed to generate holiday plan. Please try again."

RECOMMENDATIONS_HEADER = "##🔹 **Travel Recommendations:**"
