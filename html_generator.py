import logging
import time
import uuid

import config
import gemini_client
from cleaning import (
    clean_component_response,
    clean_html_response,
    extract_features,
    extract_figma_id,
)
from errors import GenerationError, ProviderNotConfiguredError
from models import (
    GeneratedHTML,
    GenerationMetadata,
    GenerationProgress,
    HTMLGeneratorConfig,
    ProgressPhase,
)
from perplexity_client import PerplexityClient
from system_prompt import (
    build_component_prompt,
    build_html_prompt,
    build_image_analysis_prompt,
    with_html_suffix,
)

logger = logging.getLogger(__name__)


class HTMLGenerator:
    """Turns a text, image or Figma input into an HTML page plus a component.

    Progress is reported through ``on_progress(GenerationProgress)`` as the
    generation moves through analyzing, generating and complete; a failure is
    reported as an ``error`` event before the exception propagates.
    """

    def __init__(self, settings=None, on_progress=None, client=None, perplexity=None):
        self.config = settings or HTMLGeneratorConfig()
        self.on_progress = on_progress
        self._client = client
        self._perplexity = perplexity
        self.last_raw_response = None

    @property
    def client(self):
        if self._client is None:
            self._client = gemini_client.get_client()
        return self._client

    @property
    def perplexity(self):
        if self._perplexity is None:
            self._perplexity = PerplexityClient()
        return self._perplexity

    def update_progress(self, phase, message, progress):
        logger.debug("%s (%d%%): %s", phase.value, progress, message)
        if self.on_progress:
            self.on_progress(GenerationProgress(phase=phase, message=message, progress=progress))

    def is_configured(self):
        if self.config.provider == "perplexity" and self._perplexity is not None:
            return self._perplexity.is_configured()
        if self.config.provider == "google" and self._client is not None:
            return True
        return config.is_provider_configured(self.config.provider)

    def generate_html(self, input_, requirements):
        if not self.is_configured():
            if self.config.provider == "perplexity":
                raise ProviderNotConfiguredError(
                    "AI service is not configured. Please set your Perplexity API key (PERPLEXITY_API_KEY)."
                )
            raise ProviderNotConfiguredError(
                "AI service is not configured. Please set your Google AI API key (GEMINI_API_KEY)."
            )

        start = time.time()
        try:
            self.update_progress(ProgressPhase.ANALYZING, "Analyzing input...", 10)
            context = self.analyze_input(input_)

            self.update_progress(ProgressPhase.GENERATING, "Generating HTML code...", 40)
            html = self.generate_code(context, requirements)

            self.update_progress(ProgressPhase.GENERATING, "Generating React component...", 70)
            react_code = self.generate_component(context, requirements)

            self.update_progress(
                ProgressPhase.COMPLETE, "HTML and React code generated successfully!", 100
            )
        except Exception as e:
            self.update_progress(ProgressPhase.ERROR, f"Error: {e}", 0)
            raise

        generation_time = int((time.time() - start) * 1000)
        logger.info(
            "Generated %r from %s input with %s/%s in %dms",
            requirements.name, input_.type, self.config.provider, self.config.model, generation_time,
        )
        return GeneratedHTML(
            id=uuid.uuid4().hex,
            name=requirements.name,
            html=html,
            react_code=react_code,
            raw_response=self.last_raw_response,
            description=input_.description,
            features=extract_features(html, requirements),
            metadata=GenerationMetadata(
                input_type=input_.type,
                original_input=input_.model_dump(exclude={"image"}),
                ai_model=self.config.model,
                generation_time=generation_time,
            ),
        )

    def analyze_input(self, input_):
        if input_.type == "figma":
            figma_id = extract_figma_id(input_.url)
            return (
                f"Figma design with ID: {figma_id}. "
                f"Create an HTML page based on this Figma design. {input_.description}"
            )
        if input_.type == "image":
            return self.analyze_image(input_)
        if input_.type == "text":
            requirements = "\n- ".join(input_.requirements)
            return f"{input_.description}\n\nAdditional requirements:\n- {requirements}"
        raise GenerationError(f"Unsupported input type: {input_.type}", status_code=400)

    def analyze_image(self, input_):
        if input_.image is None:
            raise GenerationError("Please select an image", status_code=400)
        # Vision analysis always runs on Gemini; Perplexity has no image input.
        model = self.config.model if self.config.provider == "google" else gemini_client.DEFAULT_MODEL
        prompt = build_image_analysis_prompt(input_.description)
        return gemini_client.generate_text(
            self.client, model, [prompt, gemini_client.image_part(input_.image)]
        )

    def complete(self, prompt):
        if self.config.provider == "perplexity":
            return self.perplexity.generate_content(
                prompt,
                self.config.model,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        return gemini_client.generate_text(
            self.client,
            self.config.model,
            prompt,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

    def generate_code(self, context, requirements):
        prompt = build_html_prompt(context, requirements)
        if self.config.provider == "perplexity":
            prompt = with_html_suffix(prompt)
        raw = self.complete(prompt)
        self.last_raw_response = raw
        return clean_html_response(raw)

    def generate_component(self, context, requirements):
        prompt = build_component_prompt(
            context, requirements, include_error_handling=self.config.provider == "google"
        )
        return clean_component_response(self.complete(prompt))
