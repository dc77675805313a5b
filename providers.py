from config import is_provider_configured

AI_PROVIDERS = [
    {
        "id": "google",
        "name": "Google Gemini",
        "models": [
            {
                "id": "gemini-2.0-flash-exp",
                "name": "Gemini 2.0 Flash (Experimental)",
                "description": "Latest experimental model with fast responses",
            },
            {
                "id": "gemini-1.5-pro",
                "name": "Gemini 1.5 Pro",
                "description": "Most capable model for complex tasks",
            },
            {
                "id": "gemini-1.5-flash",
                "name": "Gemini 1.5 Flash",
                "description": "Fast and efficient for most tasks",
            },
        ],
    },
    {
        "id": "perplexity",
        "name": "Perplexity AI",
        "models": [
            {
                "id": "sonar",
                "name": "Llama 3.1 Sonar Small (Online)",
                "description": "Fast online model with web access",
            },
            {
                "id": "llama-3.1-sonar-large-128k-online",
                "name": "Llama 3.1 Sonar Large (Online)",
                "description": "More capable online model with web access",
            },
            {
                "id": "llama-3.1-sonar-huge-128k-online",
                "name": "Llama 3.1 Sonar Huge (Online)",
                "description": "Most capable online model with web access",
            },
            {
                "id": "llama-3.1-8b-instruct",
                "name": "Llama 3.1 8B Instruct",
                "description": "Fast offline instruct model",
            },
            {
                "id": "llama-3.1-70b-instruct",
                "name": "Llama 3.1 70B Instruct",
                "description": "Powerful offline instruct model",
            },
        ],
    },
]


def get_provider_by_id(provider_id):
    for provider in AI_PROVIDERS:
        if provider["id"] == provider_id:
            return provider
    return None


def get_models_by_provider(provider_id):
    provider = get_provider_by_id(provider_id)
    return provider["models"] if provider else []


def get_default_model(provider_id):
    models = get_models_by_provider(provider_id)
    return models[0]["id"] if models else ""


def is_known_model(provider_id, model_id):
    return any(m["id"] == model_id for m in get_models_by_provider(provider_id))


def catalog():
    """Provider list for the settings panel, flagged with whether a key is set."""
    return [
        {**provider, "configured": is_provider_configured(provider["id"])}
        for provider in AI_PROVIDERS
    ]
