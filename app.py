import io
import logging
import time

from flask import (
    Flask,
    Response,
    jsonify,
    redirect,
    render_template_string,
    request,
    send_file,
    url_for,
)

import config
import gemini_client
from auth_client import (
    AuthClient,
    forget_login,
    is_authenticated,
    login_required,
    remember_login,
    validate_signup,
)
from errors import InvalidImageError, Snap2Error
from html_generator import HTMLGenerator
from image_editor import SUGGESTED_PROMPTS, generate_image
from models import (
    HTMLGeneratorConfig,
    HTMLInput,
    HTMLRequirements,
    ImageUpload,
    LoginCredentials,
    SignupCredentials,
)
from preview import GenerationStore, sample_generation
from providers import catalog, get_default_model, get_provider_by_id, is_known_model
from system_prompt import QUICK_TIPS

config.configure_logging()
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

store = GenerationStore()
auth = AuthClient()


def make_generator(settings, on_progress):
    return HTMLGenerator(settings, on_progress=on_progress)


def form_bool(name, default=False):
    value = request.form.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "on", "yes")


def read_image_upload(field):
    upload = request.files.get(field)
    if upload is None or not upload.filename:
        return None
    if not (upload.mimetype or "").startswith("image/"):
        raise InvalidImageError("Please select a valid image file")
    return ImageUpload(data=upload.read(), mime_type=upload.mimetype, filename=upload.filename)


def parse_generation_input():
    input_type = request.form.get("input_type", "text")

    if input_type == "text":
        description = request.form.get("description", "").strip()
        if not description:
            raise Snap2Error("Please enter a description")
        requirements = [r for r in request.form.getlist("requirements") if r.strip()]
        return HTMLInput(type="text", description=description, requirements=requirements)

    if input_type == "figma":
        url = request.form.get("figma_url", "").strip()
        if not url:
            raise Snap2Error("Please enter a Figma URL")
        return HTMLInput(type="figma", url=url, description=f"Figma design: {url}")

    if input_type == "image":
        image = read_image_upload("image")
        if image is None:
            raise Snap2Error("Please select an image")
        return HTMLInput(
            type="image",
            image=image,
            description=request.form.get("image_description", "").strip(),
        )

    raise Snap2Error("Invalid input type")


def parse_generation_settings(name):
    provider = request.form.get("provider", "google")
    if get_provider_by_id(provider) is None:
        raise Snap2Error(f"Unknown provider: {provider}")
    model = request.form.get("model") or get_default_model(provider)
    if not is_known_model(provider, model):
        raise Snap2Error(f"Unknown model: {model}")

    try:
        settings = HTMLGeneratorConfig(
            provider=provider,
            model=model,
            temperature=float(request.form.get("temperature", 0.7)),
            max_tokens=int(request.form.get("max_tokens", 4000)),
            framework=request.form.get("framework", "vanilla"),
        )
        requirements = HTMLRequirements(
            name=name,
            framework=settings.framework,
            react_framework=request.form.get("react_framework", "styled-components"),
            responsive=form_bool("responsive", True),
            animations=form_bool("animations"),
            interactive=form_bool("interactive"),
        )
    except ValueError as e:
        raise Snap2Error(f"Invalid settings: {e}") from e
    return settings, requirements


def get_session(generation_id):
    session_ = store.get(generation_id)
    if session_ is None:
        raise Snap2Error(f"Unknown generation: {generation_id}", status_code=404)
    return session_


@app.errorhandler(Snap2Error)
def handle_snap2_error(e):
    return jsonify({"error": e.message}), e.status_code


@app.route("/")
@login_required
def index():
    return INDEX_PAGE


@app.route("/image-editor")
@login_required
def image_editor_page():
    return IMAGE_EDITOR_PAGE


@app.route("/api/providers")
def providers():
    return jsonify({"providers": catalog()})


@app.route("/api/quick-tips")
def quick_tips():
    return jsonify({"categories": QUICK_TIPS})


@app.route("/api/generate", methods=["POST"])
@login_required
def generate():
    name = request.form.get("name", "").strip()
    if not name:
        return jsonify({"error": "Please enter a component name"}), 400

    input_ = parse_generation_input()
    settings, requirements = parse_generation_settings(name)

    progress = []
    generator = make_generator(settings, progress.append)

    start = time.time()
    try:
        generated = generator.generate_html(input_, requirements)
    except Snap2Error as e:
        return jsonify({
            "error": e.message,
            "progress": [p.model_dump(mode="json") for p in progress],
        }), e.status_code
    except Exception as e:
        logger.exception("Generation failed")
        return jsonify({
            "error": str(e),
            "progress": [p.model_dump(mode="json") for p in progress],
        }), 502
    elapsed = round(time.time() - start, 1)

    session_ = store.add(generated)
    payload = session_.to_json()
    payload["progress"] = [p.model_dump(mode="json") for p in progress]
    payload["elapsed"] = elapsed
    return jsonify(payload)


@app.route("/api/generations")
@login_required
def list_generations():
    return jsonify({"generations": [
        {"id": g.id, "name": g.name, "created_at": g.created_at.isoformat()}
        for g in store.recent()
    ]})


@app.route("/api/generations/sample", methods=["POST"])
@login_required
def sample():
    return jsonify(store.add(sample_generation()).to_json())


@app.route("/api/generations/<generation_id>")
@login_required
def get_generation(generation_id):
    return jsonify(get_session(generation_id).to_json())


@app.route("/api/generations/<generation_id>/code")
@login_required
def generation_code(generation_id):
    tab = request.args.get("tab", "html")
    session_ = get_session(generation_id)
    return jsonify({"tab": tab, "content": session_.editor_content(tab)})


@app.route("/api/generations/<generation_id>/edit", methods=["POST"])
@login_required
def edit_generation(generation_id):
    session_ = get_session(generation_id)
    html = (request.get_json(silent=True) or {}).get("html")
    if not isinstance(html, str):
        return jsonify({"error": "Missing html"}), 400
    session_.edit(html)
    return jsonify(session_.to_json())


@app.route("/api/generations/<generation_id>/save", methods=["POST"])
@login_required
def save_generation(generation_id):
    session_ = get_session(generation_id)
    session_.save()
    return jsonify(session_.to_json())


@app.route("/api/generations/<generation_id>/discard", methods=["POST"])
@login_required
def discard_generation(generation_id):
    session_ = get_session(generation_id)
    session_.discard()
    return jsonify(session_.to_json())


@app.route("/api/generations/<generation_id>/preview")
@login_required
def preview_generation(generation_id):
    return Response(get_session(generation_id).preview_html, mimetype="text/html")


@app.route("/api/generations/<generation_id>/download")
@login_required
def download_generation(generation_id):
    session_ = get_session(generation_id)
    return send_file(
        io.BytesIO(session_.preview_html.encode("utf-8")),
        mimetype="text/html",
        as_attachment=True,
        download_name=session_.download_filename,
    )


@app.route("/api/image/suggestions")
def image_suggestions():
    return jsonify({"categories": SUGGESTED_PROMPTS})


@app.route("/api/image/generate", methods=["POST"])
@login_required
def image_generate():
    prompt = request.form.get("prompt", "").strip()
    if not prompt:
        return jsonify({"error": "Please enter a prompt"}), 400
    reference = read_image_upload("reference")

    try:
        result = generate_image(gemini_client.get_client(), prompt, reference=reference)
    except Snap2Error:
        raise
    except Exception as e:
        logger.exception("Image generation failed")
        return jsonify({"error": str(e)}), 502
    return jsonify(result)


def safe_next(target):
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("index")


@app.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "GET":
        if is_authenticated():
            return redirect(safe_next(request.args.get("next")))
        return render_template_string(LOGIN_PAGE, error=None, email="", next=request.args.get("next", ""))

    email = request.form.get("email", "").strip()
    next_ = request.form.get("next", "")
    result = auth.login(LoginCredentials(email=email, password=request.form.get("password", "")))
    if result.success and result.data and result.data.get("token"):
        remember_login(result.data)
        logger.info("User %s signed in", email)
        return redirect(safe_next(next_))

    error = result.message or "Login failed"
    return render_template_string(LOGIN_PAGE, error=error, email=email, next=next_), 401


@app.route("/signup", methods=["GET", "POST"])
def signup():
    if request.method == "GET":
        return render_template_string(SIGNUP_PAGE, error=None, success=None, email="")

    credentials = SignupCredentials(
        email=request.form.get("email", "").strip(),
        password=request.form.get("password", ""),
        confirm_password=request.form.get("confirm_password", ""),
    )
    error = validate_signup(credentials)
    if error:
        return render_template_string(SIGNUP_PAGE, error=error, success=None, email=credentials.email), 400

    result = auth.signup(credentials)
    if not result.success:
        error = result.message or "Signup failed"
        return render_template_string(SIGNUP_PAGE, error=error, success=None, email=credentials.email), 400

    success = result.message or "Account created successfully! Please log in."
    return render_template_string(SIGNUP_PAGE, error=None, success=success, email=credentials.email)


@app.route("/logout")
def logout():
    forget_login()
    return redirect(url_for("login"))


BASE_STYLE = r"""
  *, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }

  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    background: #0f0f0f;
    color: #e0e0e0;
  }

  a { color: #a78bfa; text-decoration: none; }
  a:hover { color: #c4b5fd; }

  select, input[type=text], input[type=url], input[type=email], input[type=password], input[type=number], textarea {
    width: 100%;
    background: #1a1a1a;
    color: #e0e0e0;
    border: 1px solid #2a2a2a;
    border-radius: 8px;
    padding: 8px 12px;
    font-size: 0.85rem;
    font-family: inherit;
    outline: none;
    transition: border-color 0.2s;
  }
  select:focus, input:focus, textarea:focus { border-color: #8b5cf6; }
  textarea { resize: vertical; line-height: 1.5; }

  button, .btn {
    background: #8b5cf6;
    color: #fff;
    border: none;
    border-radius: 8px;
    padding: 8px 18px;
    font-size: 0.82rem;
    font-weight: 500;
    cursor: pointer;
    transition: background 0.2s, opacity 0.2s;
    display: inline-block;
  }
  button:hover, .btn:hover { background: #7c3aed; color: #fff; }
  button:disabled { opacity: 0.5; cursor: not-allowed; }
  button.ghost, .btn.ghost {
    background: #232323;
    color: #aaa;
    border: 1px solid #333;
  }
  button.ghost:hover, .btn.ghost:hover { background: #2e2e2e; color: #e0e0e0; }

  .error-box {
    border: 1px solid #ef4444;
    color: #fca5a5;
    background: #1a1111;
    border-radius: 8px;
    padding: 10px 12px;
    font-size: 0.82rem;
  }
  .success-box {
    border: 1px solid #22c55e;
    color: #86efac;
    background: #0f1a12;
    border-radius: 8px;
    padding: 10px 12px;
    font-size: 0.82rem;
  }
  .hidden { display: none !important; }

  .status { font-size: 0.78rem; color: #888; min-height: 1.2em; }
  .status .timer { color: #8b5cf6; font-variant-numeric: tabular-nums; }

  .spinner {
    width: 16px; height: 16px;
    border: 2px solid #333;
    border-top-color: #8b5cf6;
    border-radius: 50%;
    animation: spin 0.8s linear infinite;
    display: inline-block;
    vertical-align: middle;
  }
  @keyframes spin { to { transform: rotate(360deg); } }
"""


INDEX_PAGE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Snap2 UI</title>
<style>
/*__BASE_STYLE__*/
  body { height: 100vh; overflow: hidden; }

  .top-bar {
    padding: 12px 24px;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    display: flex;
    align-items: center;
    justify-content: space-between;
  }
  .top-bar h1 { font-size: 1.1rem; font-weight: 700; color: #fff; }
  .top-bar nav { display: flex; gap: 14px; align-items: center; }
  .top-bar nav a { color: rgba(255,255,255,0.85); font-size: 0.8rem; }

  .split-layout { display: flex; height: calc(100vh - 50px); }

  .sidebar {
    width: 380px;
    flex-shrink: 0;
    border-right: 1px solid #1e1e1e;
    overflow-y: auto;
    padding: 16px 20px 40px;
    display: flex;
    flex-direction: column;
    gap: 14px;
  }

  .tabs { display: flex; gap: 4px; border-bottom: 1px solid #1e1e1e; }
  .tabs button {
    background: transparent;
    color: #888;
    border-radius: 6px 6px 0 0;
    padding: 8px 12px;
  }
  .tabs button.active { color: #fff; background: #1a1a1a; }

  label.field { display: flex; flex-direction: column; gap: 6px; font-size: 0.75rem; color: #999; }
  .row { display: flex; gap: 8px; align-items: center; }
  .toggle { display: flex; gap: 8px; align-items: center; font-size: 0.8rem; color: #ccc; }
  .req-row { display: flex; gap: 6px; }
  .req-row button { padding: 4px 10px; }

  .progress-bar { height: 4px; background: #1e1e1e; border-radius: 2px; overflow: hidden; }
  .progress-bar div { height: 100%; width: 0; background: #8b5cf6; transition: width 0.3s; }
  .progress-log { font-size: 0.72rem; color: #777; list-style: none; }

  .provider-status { font-size: 0.72rem; color: #888; }
  .provider-status .on { color: #4ade80; }
  .provider-status .off { color: #f87171; }

  .tips { display: flex; flex-direction: column; gap: 10px; }
  .tips h4 { font-size: 0.72rem; text-transform: uppercase; letter-spacing: 0.5px; }
  .tips button { text-align: left; width: 100%; }

  .workspace { flex: 1; display: flex; flex-direction: column; overflow: hidden; }
  .workspace-header {
    padding: 10px 20px;
    border-bottom: 1px solid #1e1e1e;
    display: flex;
    gap: 8px;
    align-items: center;
    flex-wrap: wrap;
  }
  .workspace-header .name { font-weight: 600; color: #fff; margin-right: auto; }
  .chip {
    font-size: 0.65rem;
    padding: 2px 8px;
    border-radius: 4px;
    background: #2e1e3a;
    color: #a78bfa;
  }
  .chip.modified { background: #3a2e1e; color: #fbbf24; }

  .workspace-body { flex: 1; position: relative; overflow: hidden; }
  .workspace-body iframe { width: 100%; height: 100%; border: none; background: #fff; }
  .editor { width: 100%; height: 100%; display: flex; flex-direction: column; }
  .editor textarea {
    flex: 1;
    border-radius: 0;
    border: none;
    font-family: 'SF Mono', 'Fira Code', 'Cascadia Code', monospace;
    font-size: 0.78rem;
    white-space: pre;
    background: #111;
    color: #c4b5fd;
  }

  .footer-stats {
    padding: 6px 20px;
    border-top: 1px solid #1e1e1e;
    font-size: 0.7rem;
    color: #777;
  }

  .empty {
    height: 100%;
    display: flex;
    flex-direction: column;
    align-items: center;
    justify-content: center;
    gap: 14px;
    color: #777;
  }
</style>
</head>
<body>
<div class="top-bar">
  <h1>Snap2 UI</h1>
  <nav>
    <a href="/">Generator</a>
    <a href="/image-editor">Image Editor</a>
    <a href="#" id="clearAll">Clear All</a>
    <a href="/logout">Log out</a>
  </nav>
</div>

<div class="split-layout">
  <aside class="sidebar">
    <div class="tabs" id="inputTabs">
      <button class="active" data-tab="text">Text</button>
      <button data-tab="figma">Figma</button>
      <button data-tab="image">Image</button>
      <button data-tab="config">Config</button>
    </div>

    <section data-panel="text">
      <label class="field">Component Description
        <textarea id="description" rows="6" placeholder="Describe the component you want to build..."></textarea>
      </label>
      <label class="field" style="margin-top:10px">Requirements</label>
      <div id="requirements"></div>
      <div class="row" style="margin-top:6px">
        <button class="ghost" id="addRequirement" type="button">+ Requirement</button>
        <button class="ghost" id="toggleTips" type="button">Quick Tips</button>
      </div>
      <div class="tips hidden" id="tips"></div>
    </section>

    <section data-panel="figma" class="hidden">
      <label class="field">Figma URL
        <input type="url" id="figmaUrl" placeholder="https://www.figma.com/file/...">
      </label>
    </section>

    <section data-panel="image" class="hidden">
      <label class="field">Design Image
        <input type="file" id="imageFile" accept="image/*">
      </label>
      <label class="field" style="margin-top:10px">Additional Description (Optional)
        <textarea id="imageDescription" rows="3"></textarea>
      </label>
    </section>

    <section data-panel="config" class="hidden">
      <label class="field">AI Provider
        <select id="provider"></select>
      </label>
      <label class="field" style="margin-top:10px">Model
        <select id="model"></select>
      </label>
      <div class="row" style="margin-top:10px">
        <label class="field">Temperature
          <input type="number" id="temperature" min="0" max="2" step="0.1" value="0.7">
        </label>
        <label class="field">Max Tokens
          <input type="number" id="maxTokens" min="1" step="100" value="4000">
        </label>
      </div>
      <div class="provider-status" id="providerStatus" style="margin-top:10px"></div>
    </section>

    <label class="field">Component Name
      <input type="text" id="componentName" value="MyComponent">
    </label>
    <div class="row">
      <label class="field">HTML Framework
        <select id="framework">
          <option value="vanilla">Vanilla</option>
          <option value="bootstrap">Bootstrap</option>
          <option value="tailwind">Tailwind</option>
        </select>
      </label>
      <label class="field">Component Styling
        <select id="reactFramework">
          <option value="styled-components">styled-components</option>
          <option value="mui">MUI</option>
          <option value="antd">Ant Design</option>
          <option value="tailwind">Tailwind</option>
        </select>
      </label>
    </div>
    <label class="toggle"><input type="checkbox" id="responsive" checked> Responsive Design</label>
    <label class="toggle"><input type="checkbox" id="animations"> Animations &amp; Transitions</label>
    <label class="toggle"><input type="checkbox" id="interactive"> JavaScript Interactions</label>

    <button id="generateBtn">Generate</button>
    <div class="progress-bar"><div id="progressFill"></div></div>
    <div class="status" id="status"></div>
    <ul class="progress-log" id="progressLog"></ul>
    <div class="error-box hidden" id="error"></div>
  </aside>

  <main class="workspace">
    <div class="workspace-header hidden" id="workspaceHeader">
      <span class="name" id="genName"></span>
      <span class="chip modified hidden" id="modifiedChip">Modified</span>
      <div class="tabs" id="viewTabs">
        <button class="active" data-view="preview">Preview</button>
        <button data-view="html">HTML</button>
        <button data-view="react">Component</button>
        <button data-view="raw">Raw</button>
      </div>
      <button class="ghost" id="refreshBtn">Refresh</button>
      <button class="ghost" id="copyBtn">Copy</button>
      <button class="ghost" id="saveBtn" disabled>Save</button>
      <button class="ghost" id="discardBtn" disabled>Discard</button>
      <a class="btn ghost" id="openBtn" target="_blank">Open</a>
      <a class="btn" id="downloadBtn">Download</a>
    </div>
    <div class="workspace-body">
      <div class="empty" id="emptyState">
        <p>Generate code to see a preview</p>
        <button class="ghost" id="sampleBtn">Try Sample Preview</button>
      </div>
      <iframe id="previewFrame" class="hidden" sandbox="allow-scripts allow-modals"></iframe>
      <div class="editor hidden" id="editorPane">
        <textarea id="editor" spellcheck="false"></textarea>
      </div>
    </div>
    <div class="footer-stats hidden" id="stats"></div>
  </main>
</div>

<script>
  let activeInput = 'text';
  let activeView = 'preview';
  let current = null;
  let providers = [];
  let editTimer = null;

  const $ = id => document.getElementById(id);

  // ── Timer helper ──
  function createTimer(statusEl) {
    let interval = null;
    return {
      start() {
        const t0 = Date.now();
        clearInterval(interval);
        interval = setInterval(() => {
          const s = ((Date.now() - t0) / 1000).toFixed(1);
          statusEl.innerHTML = '<span class="timer">' + s + 's</span> waiting for response...';
        }, 100);
      },
      stop() { clearInterval(interval); interval = null; }
    };
  }
  const timer = createTimer($('status'));

  async function api(url, options) {
    const res = await fetch(url, options);
    const data = await res.json();
    if (!res.ok || data.error) {
      const err = new Error(data.error || 'HTTP ' + res.status);
      err.progress = data.progress || [];
      throw err;
    }
    return data;
  }

  // ── Input tabs ──
  document.querySelectorAll('#inputTabs button').forEach(btn => {
    btn.addEventListener('click', () => selectInputTab(btn.dataset.tab));
  });

  function selectInputTab(tab) {
    document.querySelectorAll('#inputTabs button').forEach(b => b.classList.toggle('active', b.dataset.tab === tab));
    document.querySelectorAll('[data-panel]').forEach(p => p.classList.toggle('hidden', p.dataset.panel !== tab));
    if (tab !== 'config') activeInput = tab;
    showError(null);
  }

  // ── Requirements list ──
  function addRequirement(value) {
    const row = document.createElement('div');
    row.className = 'req-row';
    row.innerHTML = '<input type="text" class="req" placeholder="e.g. Dark mode support"><button class="ghost" type="button">&times;</button>';
    row.querySelector('input').value = value || '';
    row.querySelector('button').addEventListener('click', () => {
      if (document.querySelectorAll('.req-row').length > 1) row.remove();
    });
    $('requirements').appendChild(row);
  }
  $('addRequirement').addEventListener('click', () => addRequirement(''));
  addRequirement('');

  // ── Quick tips ──
  $('toggleTips').addEventListener('click', async () => {
    const tips = $('tips');
    tips.classList.toggle('hidden');
    if (tips.childElementCount) return;
    const data = await api('/api/quick-tips');
    data.categories.forEach(cat => {
      const h = document.createElement('h4');
      h.textContent = cat.title;
      h.style.color = cat.color;
      tips.appendChild(h);
      cat.prompts.forEach(p => {
        const b = document.createElement('button');
        b.className = 'ghost';
        b.textContent = p.title + ' - ' + p.description;
        b.addEventListener('click', () => {
          $('description').value = p.prompt;
          tips.classList.add('hidden');
          selectInputTab('text');
        });
        tips.appendChild(b);
      });
    });
  });

  // ── Providers ──
  async function loadProviders() {
    const data = await api('/api/providers');
    providers = data.providers;
    const sel = $('provider');
    sel.innerHTML = '';
    providers.forEach(p => {
      const opt = document.createElement('option');
      opt.value = p.id;
      opt.textContent = p.name + (p.configured ? '' : ' (Not Configured)');
      opt.disabled = !p.configured;
      sel.appendChild(opt);
    });
    const firstConfigured = providers.find(p => p.configured);
    if (firstConfigured) sel.value = firstConfigured.id;
    fillModels();

    const status = $('providerStatus');
    status.innerHTML = providers.map(p =>
      p.name + ': <span class="' + (p.configured ? 'on">Configured' : 'off">Not configured') + '</span>'
    ).join('<br>');
    if (!providers.some(p => p.configured)) {
      status.innerHTML += '<br>No AI providers configured. Please add GEMINI_API_KEY or PERPLEXITY_API_KEY to your .env file.';
    }
  }

  function fillModels() {
    const provider = providers.find(p => p.id === $('provider').value);
    const sel = $('model');
    sel.innerHTML = '';
    (provider ? provider.models : []).forEach(m => {
      const opt = document.createElement('option');
      opt.value = m.id;
      opt.textContent = m.name;
      opt.title = m.description;
      sel.appendChild(opt);
    });
  }
  $('provider').addEventListener('change', fillModels);

  // ── Generation ──
  function showError(message) {
    $('error').textContent = message || '';
    $('error').classList.toggle('hidden', !message);
  }

  function renderProgress(events) {
    const log = $('progressLog');
    log.innerHTML = '';
    events.forEach(ev => {
      const li = document.createElement('li');
      li.textContent = ev.progress + '% ' + ev.message;
      log.appendChild(li);
    });
    const last = events[events.length - 1];
    $('progressFill').style.width = (last ? last.progress : 0) + '%';
  }

  $('generateBtn').addEventListener('click', async () => {
    const fd = new FormData();
    fd.append('name', $('componentName').value);
    fd.append('input_type', activeInput);
    fd.append('description', $('description').value);
    document.querySelectorAll('.req').forEach(r => fd.append('requirements', r.value));
    fd.append('figma_url', $('figmaUrl').value);
    if ($('imageFile').files[0]) fd.append('image', $('imageFile').files[0]);
    fd.append('image_description', $('imageDescription').value);
    fd.append('provider', $('provider').value);
    fd.append('model', $('model').value);
    fd.append('temperature', $('temperature').value);
    fd.append('max_tokens', $('maxTokens').value);
    fd.append('framework', $('framework').value);
    fd.append('react_framework', $('reactFramework').value);
    ['responsive', 'animations', 'interactive'].forEach(k => fd.append(k, $(k).checked ? 'true' : 'false'));

    showError(null);
    renderProgress([{ progress: 0, message: 'Starting HTML generation...' }]);
    $('generateBtn').disabled = true;
    $('generateBtn').textContent = 'Generating...';
    timer.start();
    try {
      const data = await api('/api/generate', { method: 'POST', body: fd });
      timer.stop();
      renderProgress(data.progress);
      $('status').innerHTML = 'Completed in <span class="timer">' + data.elapsed + 's</span>';
      showGeneration(data);
    } catch (e) {
      timer.stop();
      renderProgress(e.progress || []);
      $('status').textContent = '';
      showError(e.message);
    } finally {
      $('generateBtn').disabled = false;
      $('generateBtn').textContent = 'Generate';
    }
  });

  $('sampleBtn').addEventListener('click', async () => {
    showGeneration(await api('/api/generations/sample', { method: 'POST' }));
  });

  // ── Preview / editor loop ──
  function showGeneration(data) {
    current = data;
    const g = data.generation;
    $('emptyState').classList.add('hidden');
    $('workspaceHeader').classList.remove('hidden');
    $('stats').classList.remove('hidden');
    $('genName').textContent = g.name;
    $('openBtn').href = '/api/generations/' + g.id + '/preview';
    $('downloadBtn').href = '/api/generations/' + g.id + '/download';
    updateChrome();
    selectView(activeView);
  }

  function updateChrome() {
    $('modifiedChip').classList.toggle('hidden', !current.has_changes);
    $('saveBtn').disabled = !current.has_changes;
    $('discardBtn').disabled = !current.has_changes;
    const s = current.stats;
    $('stats').textContent = s.characters + ' characters • ' + s.lines + ' lines' + (s.modified ? ' • Modified' : '');
  }

  function reloadPreview() {
    if (!current) return;
    $('previewFrame').src = '/api/generations/' + current.generation.id + '/preview?t=' + Date.now();
  }

  async function selectView(view) {
    activeView = view;
    document.querySelectorAll('#viewTabs button').forEach(b => b.classList.toggle('active', b.dataset.view === view));
    if (!current) return;
    const isPreview = view === 'preview';
    $('previewFrame').classList.toggle('hidden', !isPreview);
    $('editorPane').classList.toggle('hidden', isPreview);
    if (isPreview) { reloadPreview(); return; }
    const data = await api('/api/generations/' + current.generation.id + '/code?tab=' + view);
    $('editor').value = data.content;
    $('editor').readOnly = view !== 'html';
  }
  document.querySelectorAll('#viewTabs button').forEach(btn => {
    btn.addEventListener('click', () => selectView(btn.dataset.view));
  });

  $('editor').addEventListener('input', () => {
    if (activeView !== 'html' || !current) return;
    clearTimeout(editTimer);
    editTimer = setTimeout(async () => {
      current = await api('/api/generations/' + current.generation.id + '/edit', {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify({ html: $('editor').value }),
      });
      updateChrome();
    }, 300);
  });

  async function commit(action) {
    current = await api('/api/generations/' + current.generation.id + '/' + action, { method: 'POST' });
    updateChrome();
    selectView(activeView);
  }
  $('saveBtn').addEventListener('click', () => commit('save'));
  $('discardBtn').addEventListener('click', () => commit('discard'));
  $('refreshBtn').addEventListener('click', reloadPreview);

  $('copyBtn').addEventListener('click', async () => {
    const tab = activeView === 'preview' ? 'html' : activeView;
    const data = await api('/api/generations/' + current.generation.id + '/code?tab=' + tab);
    navigator.clipboard.writeText(data.content);
    $('copyBtn').textContent = 'Copied!';
    setTimeout(() => $('copyBtn').textContent = 'Copy', 2000);
  });

  $('clearAll').addEventListener('click', e => {
    e.preventDefault();
    $('figmaUrl').value = '';
    $('imageFile').value = '';
    $('imageDescription').value = '';
    $('description').value = '';
    $('requirements').innerHTML = '';
    addRequirement('');
    current = null;
    showError(null);
    renderProgress([]);
    $('status').textContent = '';
    $('workspaceHeader').classList.add('hidden');
    $('stats').classList.add('hidden');
    $('previewFrame').classList.add('hidden');
    $('editorPane').classList.add('hidden');
    $('emptyState').classList.remove('hidden');
  });

  loadProviders().catch(e => showError(e.message));
</script>
</body>
</html>
""".replace("/*__BASE_STYLE__*/", BASE_STYLE)


IMAGE_EDITOR_PAGE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Image Editor</title>
<style>
/*__BASE_STYLE__*/
  .container {
    max-width: 1100px;
    margin: 0 auto;
    padding: 32px 20px;
    display: flex;
    gap: 24px;
    flex-wrap: wrap;
  }
  .top-bar { display: flex; justify-content: space-between; align-items: center; max-width: 1100px; margin: 0 auto; padding: 20px 20px 0; }
  .top-bar h1 { font-size: 1.3rem; color: #fff; }
  .top-bar h1 span { color: #8b5cf6; }
  .top-bar nav { display: flex; gap: 14px; font-size: 0.8rem; }
  .card {
    background: #141414;
    border: 1px solid #1e1e1e;
    border-radius: 12px;
    padding: 20px;
    display: flex;
    flex-direction: column;
    gap: 14px;
  }
  .main { flex: 2 1 500px; display: flex; flex-direction: column; gap: 20px; }
  .side { flex: 1 1 280px; }
  .result img { width: 100%; max-height: 500px; object-fit: contain; border-radius: 8px; background: #1a1a1a; }
  .thumb { display: flex; gap: 8px; align-items: center; font-size: 0.78rem; }
  .thumb img { width: 36px; height: 36px; object-fit: cover; border-radius: 50%; }
  .cat-tabs { display: flex; gap: 4px; flex-wrap: wrap; }
  .cat-tabs button { padding: 4px 10px; font-size: 0.72rem; }
  .cat-tabs button:not(.active) { background: #232323; color: #aaa; }
  .suggestions { list-style: none; display: flex; flex-direction: column; gap: 6px; }
  .suggestions li { font-size: 0.8rem; padding: 8px 10px; border-radius: 8px; cursor: pointer; background: #1a1a1a; }
  .suggestions li:hover { background: #232323; }
  .usage { font-size: 0.75rem; color: #888; text-align: center; }
</style>
</head>
<body>
<div class="top-bar">
  <h1>Image <span>Editor</span></h1>
  <nav><a href="/">Generator</a><a href="/logout">Log out</a></nav>
</div>
<div class="container">
  <div class="main">
    <div class="card">
      <h3>Describe the modification</h3>
      <textarea id="prompt" rows="3" placeholder="e.g., Make the background sunset-themed"></textarea>
      <div class="thumb hidden" id="thumb">
        <img id="thumbImg" alt="">
        <span>Uploaded Image</span>
        <button class="ghost" id="removeImage">&times;</button>
      </div>
      <div style="display:flex; gap:10px; flex-wrap:wrap">
        <button class="ghost" id="uploadBtn">Upload Image</button>
        <input type="file" id="reference" accept="image/*" class="hidden">
        <button id="generateBtn">Generate Image</button>
      </div>
      <div class="status" id="status"></div>
      <div class="error-box hidden" id="error"></div>
    </div>
    <div class="card result hidden" id="result">
      <img id="resultImg" alt="Generated">
      <div><a class="btn ghost" id="downloadBtn" download="generated-image.png">Download</a></div>
      <div class="usage" id="usage"></div>
    </div>
  </div>
  <div class="side">
    <div class="card">
      <h3>Suggested Prompts</h3>
      <div class="cat-tabs" id="catTabs"></div>
      <ul class="suggestions" id="suggestions"></ul>
    </div>
  </div>
</div>
<script>
  const $ = id => document.getElementById(id);
  let categories = {};
  let thumbUrl = null;

  function createTimer(statusEl) {
    let interval = null;
    return {
      start() {
        const t0 = Date.now();
        clearInterval(interval);
        interval = setInterval(() => {
          const s = ((Date.now() - t0) / 1000).toFixed(1);
          statusEl.innerHTML = '<span class="timer">' + s + 's</span> waiting for response...';
        }, 100);
      },
      stop() { clearInterval(interval); interval = null; }
    };
  }
  const timer = createTimer($('status'));

  function showError(message) {
    $('error').textContent = message || '';
    $('error').classList.toggle('hidden', !message);
  }

  function clearReference() {
    $('reference').value = '';
    if (thumbUrl) URL.revokeObjectURL(thumbUrl);
    thumbUrl = null;
    $('thumb').classList.add('hidden');
  }

  $('uploadBtn').addEventListener('click', () => $('reference').click());
  $('removeImage').addEventListener('click', clearReference);
  $('reference').addEventListener('change', () => {
    const file = $('reference').files[0];
    if (!file) return;
    if (thumbUrl) URL.revokeObjectURL(thumbUrl);
    thumbUrl = URL.createObjectURL(file);
    $('thumbImg').src = thumbUrl;
    $('thumb').classList.remove('hidden');
  });

  $('generateBtn').addEventListener('click', async () => {
    const prompt = $('prompt').value.trim();
    if (!prompt) { showError('Please enter a prompt'); return; }
    const fd = new FormData();
    fd.append('prompt', prompt);
    if ($('reference').files[0]) fd.append('reference', $('reference').files[0]);

    showError(null);
    $('generateBtn').disabled = true;
    $('generateBtn').textContent = 'Generating...';
    timer.start();
    try {
      const res = await fetch('/api/image/generate', { method: 'POST', body: fd });
      const data = await res.json();
      if (!res.ok || data.error) throw new Error(data.error || 'HTTP ' + res.status);
      timer.stop();
      $('status').innerHTML = 'Completed in <span class="timer">' + data.elapsed + 's</span>';
      $('resultImg').src = data.image;
      $('downloadBtn').href = data.image;
      $('usage').textContent = data.usage ? 'Tokens used: ' + data.usage.totalTokenCount : '';
      $('result').classList.remove('hidden');
      $('prompt').value = '';
      clearReference();
    } catch (e) {
      timer.stop();
      $('status').textContent = '';
      showError('Error generating image: ' + e.message);
    } finally {
      $('generateBtn').disabled = false;
      $('generateBtn').textContent = 'Generate Image';
    }
  });

  function selectCategory(name) {
    document.querySelectorAll('#catTabs button').forEach(b => b.classList.toggle('active', b.textContent === name));
    const list = $('suggestions');
    list.innerHTML = '';
    categories[name].forEach(p => {
      const li = document.createElement('li');
      li.textContent = p;
      li.addEventListener('click', () => { $('prompt').value = p; });
      list.appendChild(li);
    });
  }

  fetch('/api/image/suggestions').then(r => r.json()).then(data => {
    categories = data.categories;
    Object.keys(categories).forEach(name => {
      const b = document.createElement('button');
      b.textContent = name;
      b.addEventListener('click', () => selectCategory(name));
      $('catTabs').appendChild(b);
    });
    selectCategory(Object.keys(categories)[0]);
  });
</script>
</body>
</html>
""".replace("/*__BASE_STYLE__*/", BASE_STYLE)


AUTH_STYLE = r"""
  body {
    min-height: 100vh;
    display: flex;
    align-items: center;
    justify-content: center;
    background: linear-gradient(135deg, #0f172a 0%, #1e293b 50%, #334155 100%);
  }
  .auth-card {
    width: 100%;
    max-width: 380px;
    background: #141414;
    border: 1px solid #1e1e1e;
    border-radius: 14px;
    padding: 32px 28px;
    display: flex;
    flex-direction: column;
    gap: 14px;
  }
  .auth-card h1 { font-size: 1.3rem; color: #fff; }
  .auth-card p.sub { font-size: 0.8rem; color: #888; }
  .auth-card form { display: flex; flex-direction: column; gap: 12px; }
  .auth-card label { font-size: 0.75rem; color: #999; display: flex; flex-direction: column; gap: 6px; }
  .auth-card .alt { font-size: 0.78rem; color: #888; text-align: center; }
"""


LOGIN_PAGE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Login - Snap2 UI</title>
<style>/*__BASE_STYLE__*//*__AUTH_STYLE__*/</style>
</head>
<body>
<div class="auth-card">
  <h1>Welcome back</h1>
  <p class="sub">Sign in to continue to Snap2 UI</p>
  {% if error %}<div class="error-box">{{ error }}</div>{% endif %}
  <form method="post" action="/login">
    <input type="hidden" name="next" value="{{ next }}">
    <label>Email <input type="email" name="email" value="{{ email }}" required></label>
    <label>Password <input type="password" name="password" required></label>
    <button type="submit">Sign In</button>
  </form>
  <p class="alt">Don't have an account? <a href="/signup">Sign up</a></p>
</div>
</body>
</html>
""".replace("/*__BASE_STYLE__*/", BASE_STYLE).replace("/*__AUTH_STYLE__*/", AUTH_STYLE)


SIGNUP_PAGE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
{% if success %}<meta http-equiv="refresh" content="2;url=/login">{% endif %}
<title>Sign Up - Snap2 UI</title>
<style>/*__BASE_STYLE__*//*__AUTH_STYLE__*/</style>
</head>
<body>
<div class="auth-card">
  <h1>Create an account</h1>
  <p class="sub">Start generating components in seconds</p>
  {% if error %}<div class="error-box">{{ error }}</div>{% endif %}
  {% if success %}<div class="success-box">{{ success }}</div>{% endif %}
  <form method="post" action="/signup">
    <label>Email <input type="email" name="email" value="{{ email }}" required></label>
    <label>Password <input type="password" name="password" required></label>
    <label>Confirm Password <input type="password" name="confirm_password" required></label>
    <button type="submit">Sign Up</button>
  </form>
  <p class="alt">Already have an account? <a href="/login">Sign in</a></p>
</div>
</body>
</html>
""".replace("/*__BASE_STYLE__*/", BASE_STYLE).replace("/*__AUTH_STYLE__*/", AUTH_STYLE)

if __name__ == "__main__":
    app.run(debug=True, port=config.PORT, threaded=True)
