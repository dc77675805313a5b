import base64
import logging
import time

from google.genai import types
from google.genai.types import Modality

import config
import gemini_client
from errors import ImageGenerationError

logger = logging.getLogger(__name__)

SUGGESTED_PROMPTS = {
    "Artistic Styles": [
        "Transform this photo into a vintage Polaroid with soft, faded colors and a grainy texture.",
        "Give this image a cinematic, high-contrast look with a teal-and-orange color grade.",
        "Turn this photo into a Studio Ghibli-style watercolor illustration with a cozy, soft palette.",
        "Convert this selfie into a 3D Pixar-style cartoon with clean lines and soft lighting.",
        "Apply an oil painting effect to this image with visible brush strokes and a textured canvas feel.",
    ],
    "Functional Edits": [
        "Remove the person on the left from the background and keep the natural scenery intact.",
        "Brighten this image, enhance the contrast, and make the colors more vibrant.",
        "Add a golden sunset to the background and apply a warm, ethereal glow to the entire scene.",
        "Change the background of this photo to a cyberpunk city street with neon signs and glowing rain puddles.",
        "Insert a group of soaring birds into the sky and make them look realistic.",
    ],
    "Thematic Moods": [
        "Create a romantic, rainy day scene with wet streets and a couple sharing an umbrella.",
        "Transform this portrait into a magical, fairy-tale setting with glowing fireflies and mystical lighting.",
        "Give this photo a dark, moody feel with deep shadows and muted, cinematic tones.",
        "Generate a festive Holi celebration scene with people throwing bright colored powders and joyful expressions.",
    ],
    "Photo Enhancements": [
        "Add a bokeh effect to the background, softly blurring it while keeping the subject in sharp focus.",
        "Make this a high-resolution, photorealistic image with crisp details and natural lighting.",
        "Apply a vintage VHS effect with grainy textures and a subtle color bleed.",
        "Convert this photo into a classic black-and-white image with a timeless, high-contrast aesthetic.",
    ],
}


def generate_image(client, prompt, reference=None, model=None):
    """Send ``prompt`` (and an optional reference image) to the image model.

    Returns a dict with the image as a data URL, any accompanying text, and
    token usage as reported by the API.
    """
    prompt = (prompt or "").strip()
    if not prompt:
        raise ImageGenerationError("Please enter a prompt", status_code=400)

    model = model or config.IMAGE_MODEL
    contents = [prompt]
    if reference is not None:
        contents.append(gemini_client.image_part(reference))

    image_config = types.GenerateContentConfig(
        response_modalities=[Modality.TEXT, Modality.IMAGE],
    )

    start = time.time()
    response = client.models.generate_content(model=model, contents=contents, config=image_config)
    elapsed = round(time.time() - start, 1)
    logger.info("Image model %s answered in %.1fs", model, elapsed)

    result = {"image": None, "text": None, "usage": None, "elapsed": elapsed}
    candidates = response.candidates or []
    parts = candidates[0].content.parts if candidates and candidates[0].content else []
    for part in parts or []:
        if part.text:
            result["text"] = part.text
        elif part.inline_data:
            b64 = base64.b64encode(part.inline_data.data).decode("utf-8")
            mime = part.inline_data.mime_type or "image/png"
            result["image"] = f"data:{mime};base64,{b64}"

    if not result["image"]:
        raise ImageGenerationError("Model did not return an image")

    usage = getattr(response, "usage_metadata", None)
    if usage is not None:
        result["usage"] = {"totalTokenCount": usage.total_token_count}
    return result
