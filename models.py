from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

InputType = Literal["text", "figma", "image"]
Framework = Literal["vanilla", "bootstrap", "tailwind"]
ComponentFramework = Literal["styled-components", "mui", "antd", "tailwind"]
ProviderId = Literal["google", "perplexity"]


class ImageUpload(BaseModel):
    data: bytes
    mime_type: str
    filename: str = "upload"


class HTMLInput(BaseModel):
    type: InputType
    description: str = ""
    url: Optional[str] = None
    image: Optional[ImageUpload] = None
    requirements: List[str] = Field(default_factory=list)


class HTMLRequirements(BaseModel):
    name: str
    framework: Framework = "vanilla"
    react_framework: ComponentFramework = "styled-components"
    responsive: bool = True
    animations: bool = False
    interactive: bool = False


class HTMLGeneratorConfig(BaseModel):
    provider: ProviderId = "google"
    model: str = "gemini-2.0-flash-exp"
    temperature: float = Field(0.7, ge=0, le=2)
    max_tokens: int = Field(4000, gt=0)
    framework: Framework = "vanilla"


class ProgressPhase(str, Enum):
    ANALYZING = "analyzing"
    GENERATING = "generating"
    COMPLETE = "complete"
    ERROR = "error"


class GenerationProgress(BaseModel):
    phase: ProgressPhase
    message: str
    progress: int = Field(ge=0, le=100)


class GenerationMetadata(BaseModel):
    input_type: InputType
    original_input: Dict[str, Any]
    ai_model: str
    generation_time: int  # milliseconds


class GeneratedHTML(BaseModel):
    id: str
    name: str
    html: str
    react_code: Optional[str] = None
    raw_response: Optional[str] = None
    description: str = ""
    features: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: Optional[GenerationMetadata] = None


class User(BaseModel):
    id: str
    email: str


class LoginCredentials(BaseModel):
    email: str
    password: str


class SignupCredentials(BaseModel):
    email: str
    password: str
    confirm_password: str


class ApiResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
