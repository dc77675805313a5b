import re
import threading
from collections import OrderedDict

from models import GeneratedHTML, GenerationMetadata

NO_COMPONENT_CODE = "No React code available"
NO_RAW_RESPONSE = "No raw response available"


class PreviewSession:
    """Editor state for one generation.

    ``generation.html`` is the last-known-good document. Edits live in
    ``edited_html`` until saved; the preview, copy and download paths always
    show the edited document while there are unsaved changes. Mutations and
    snapshots hold the session lock so concurrent requests see whole states.
    """

    def __init__(self, generation):
        self.generation = generation
        self.edited_html = generation.html
        self.has_changes = False
        self._lock = threading.RLock()

    @property
    def preview_html(self):
        with self._lock:
            return self.edited_html if self.has_changes else self.generation.html

    def editor_content(self, tab="html"):
        if tab == "react":
            return self.generation.react_code or NO_COMPONENT_CODE
        if tab == "raw":
            return self.generation.raw_response or NO_RAW_RESPONSE
        return self.preview_html

    def edit(self, value):
        if value is None:
            return
        with self._lock:
            self.edited_html = value
            self.has_changes = value != self.generation.html

    def save(self):
        with self._lock:
            self.generation = self.generation.model_copy(update={"html": self.edited_html})
            self.has_changes = False
            return self.generation

    def discard(self):
        with self._lock:
            self.edited_html = self.generation.html
            self.has_changes = False

    @property
    def download_filename(self):
        return re.sub(r"\s+", "-", self.generation.name).lower() + ".html"

    def stats(self):
        with self._lock:
            html = self.preview_html
            return {
                "characters": len(html),
                "lines": len(html.split("\n")),
                "modified": self.has_changes,
            }

    def to_json(self):
        with self._lock:
            return {
                "generation": self.generation.model_dump(mode="json"),
                "has_changes": self.has_changes,
                "stats": self.stats(),
                "download_filename": self.download_filename,
            }


class GenerationStore:
    """In-memory registry of preview sessions, oldest dropped past ``max_entries``."""

    def __init__(self, max_entries=50):
        self.max_entries = max_entries
        self._sessions = OrderedDict()
        self._lock = threading.Lock()

    def add(self, generation):
        session = PreviewSession(generation)
        with self._lock:
            self._sessions[generation.id] = session
            self._sessions.move_to_end(generation.id)
            while len(self._sessions) > self.max_entries:
                self._sessions.popitem(last=False)
        return session

    def get(self, generation_id):
        with self._lock:
            return self._sessions.get(generation_id)

    def recent(self):
        with self._lock:
            sessions = list(self._sessions.values())
        return [s.generation for s in reversed(sessions)]

    def clear(self):
        with self._lock:
            self._sessions.clear()

    def __len__(self):
        with self._lock:
            return len(self._sessions)


SAMPLE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Sample Card Component</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            margin: 0;
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            transition: background 0.5s ease;
        }
        .card {
            background: white;
            padding: 40px;
            border-radius: 20px;
            box-shadow: 0 20px 40px rgba(0, 0, 0, 0.1);
            text-align: center;
            max-width: 400px;
            animation: slideUp 0.6s ease-out;
        }
        @keyframes slideUp {
            from { opacity: 0; transform: translateY(30px); }
            to { opacity: 1; transform: translateY(0); }
        }
        h1 { color: #333; margin-bottom: 20px; }
        p { color: #666; line-height: 1.6; margin-bottom: 30px; }
        .btn {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            border: none;
            padding: 12px 30px;
            border-radius: 25px;
            font-size: 16px;
            cursor: pointer;
            transition: all 0.3s ease;
            margin: 0 10px;
        }
        .btn:hover {
            transform: scale(1.05);
            box-shadow: 0 5px 15px rgba(102, 126, 234, 0.4);
        }
        .btn-secondary {
            background: transparent;
            border: 2px solid #667eea;
            color: #667eea;
        }
        .btn-secondary:hover { background: #667eea; color: white; }
        @media (max-width: 480px) {
            .card { margin: 20px; padding: 20px; }
            .btn { display: block; margin: 10px 0; width: 100%; }
        }
    </style>
</head>
<body>
    <div class="card">
        <h1>Hello World!</h1>
        <p>This is a beautiful sample card component with modern styling, hover effects, and responsive design. Click the buttons to test interactions!</p>
        <button class="btn" onclick="showAlert()">Click Me!</button>
        <button class="btn btn-secondary" onclick="changeColor()">Change Color</button>
    </div>

    <script>
        function showAlert() {
            alert('Hello from the sample HTML component!');
        }

        function changeColor() {
            const colors = [
                'linear-gradient(135deg, #667eea 0%, #764ba2 100%)',
                'linear-gradient(135deg, #f093fb 0%, #f5576c 100%)',
                'linear-gradient(135deg, #4facfe 0%, #00f2fe 100%)',
                'linear-gradient(135deg, #43e97b 0%, #38f9d7 100%)',
                'linear-gradient(135deg, #fa709a 0%, #fee140 100%)'
            ];
            document.body.style.background = colors[Math.floor(Math.random() * colors.length)];
        }
    </script>
</body>
</html>"""


def sample_generation():
    return GeneratedHTML(
        id="test-sample",
        name="SampleCard",
        html=SAMPLE_HTML,
        description="A beautiful sample card component with animations and interactions",
        features=[
            "Responsive Design",
            "CSS Animations",
            "JavaScript Interactions",
            "Modern Styling",
            "Hover Effects",
        ],
        metadata=GenerationMetadata(
            input_type="text",
            original_input={"type": "text", "description": "Create a sample card component"},
            ai_model="Sample Generator",
            generation_time=0,
        ),
    )
