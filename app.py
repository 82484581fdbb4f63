#!/usr/bin/env python3

import logging
import os
import re
from typing import Tuple

import gradio as gr

from backend.services.k8s_service import LogsService, logs_service
from podlogs.config import settings
from podlogs.errors import PodLogsError
from podlogs.logging_config import setup_logging
from podlogs.schemas import LogQuery, Logs
from podlogs.window import page_start

logger = logging.getLogger("podlogs.ui")


def _get_service() -> LogsService:
    return logs_service


# ---------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------

def _colorize_logs(lines) -> str:
    if not lines:
        return "<span style='color:#888;'>No logs</span>"

    html_lines = []
    for line in lines:
        if re.search(r"(error|failed|exception)", line, re.IGNORECASE):
            color = "#ff4b4b"
        elif re.search(r"warn", line, re.IGNORECASE):
            color = "#f7c843"
        elif re.search(r"(info|started|running|completed)", line, re.IGNORECASE):
            color = "#5ad55a"
        else:
            color = "#d0d0d0"

        safe = line.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        html_lines.append(f"<span style='color:{color};'>{safe}</span>")

    return "<br>".join(html_lines)


def _status_line(result: Logs) -> str:
    if not result.logs:
        return f"No lines to show ({result.total} total) in container {result.container}"
    first = result.start_index + 1
    last = result.start_index + len(result.logs)
    return f"Showing lines {first}-{last} of {result.total} in container {result.container}"


# ---------------------------------------------------------------------
# Paging
# ---------------------------------------------------------------------

def show_page(
    namespace: str,
    pod_name: str,
    container: str,
    start_index: int,
    per_page: int,
    current_index: int = 0,
) -> Tuple[str, str, int]:
    """Fetch one page and return (html, status, page index to remember).

    On failure the remembered index stays at ``current_index``, the page on screen.
    """
    pod_name = (pod_name or "").strip()
    if not pod_name:
        return "<span style='color:#ff4b4b;'>Enter a pod name.</span>", "", int(current_index)

    query = LogQuery(
        namespace=(namespace or "").strip() or settings.k8s_namespace,
        pod_id=pod_name,
        container=(container or "").strip(),
        start_index=int(start_index),
        count=int(per_page),
    )
    try:
        result = _get_service().get_logs(query)
    except PodLogsError as e:
        logger.warning("Failed to get logs for %s: %s", pod_name, e)
        return f"<span style='color:#ff4b4b;'>{e}</span>", "", int(current_index)

    return _colorize_logs(result.logs), _status_line(result), result.start_index


def _pager(action: str):
    def handler(namespace, pod_name, container, current_index, per_page):
        start = page_start(action, int(current_index), int(per_page))
        return show_page(namespace, pod_name, container, start, per_page, current_index)
    return handler


# ---------------------------------------------------------------------
# Logs CSS
# ---------------------------------------------------------------------

LOGS_TEXT_COLOR = "kd-logs-text-color"


def _style_class(inverted: bool) -> str:
    if inverted:
        return f"{LOGS_TEXT_COLOR}-invert"
    return LOGS_TEXT_COLOR


def _toggle_colors(inverted: bool):
    return gr.update(elem_classes=[_style_class(inverted)])


TERMINAL_CSS = """
#logs_terminal {
    font-family: monospace;
    padding: 14px;
    border-radius: 8px;
    border: 1px solid #444;
    height: 420px;
    overflow-y: scroll;
    white-space: pre-wrap;
}
#logs_terminal.kd-logs-text-color {
    background-color: #111;
    color: #ddd;
}
/* line colours are inline, so flip the whole box */
#logs_terminal.kd-logs-text-color-invert {
    background-color: #111;
    color: #ddd;
    filter: invert(1) hue-rotate(180deg);
}
"""


# ---------------------------------------------------------------------
# UI
# ---------------------------------------------------------------------

def build_app() -> gr.Blocks:
    with gr.Blocks(title="Pod Logs", css=TERMINAL_CSS) as demo:

        gr.Markdown("""
### 🔧 Environment
- `K8S_API_BASE_URL`
- `K8S_NAMESPACE`
- `K8S_VERIFY_SSL`
- `K8S_BEARER_TOKEN` (optional)
---
""")

        with gr.Row():
            namespace = gr.Textbox(label="Namespace", value=settings.k8s_namespace)
            pod_name = gr.Textbox(label="Pod name")
            container = gr.Textbox(label="Container", placeholder="first container if empty")
            per_page = gr.Slider(10, 500, step=10, value=settings.logs_per_page, label="Lines per page")
            invert = gr.Checkbox(label="Invert colours", value=False)

        current_index = gr.State(0)

        with gr.Row():
            first_btn = gr.Button("First")
            prev_btn = gr.Button("Previous")
            next_btn = gr.Button("Next")
            last_btn = gr.Button("Last", variant="primary")

        status = gr.Markdown()
        logs_box = gr.HTML(elem_id="logs_terminal", elem_classes=[LOGS_TEXT_COLOR], label="Logs")

        inputs = [namespace, pod_name, container, current_index, per_page]
        outputs = [logs_box, status, current_index]
        for btn, action in (
            (first_btn, "first"),
            (prev_btn, "previous"),
            (next_btn, "next"),
            (last_btn, "last"),
        ):
            btn.click(_pager(action), inputs=inputs, outputs=outputs)

        invert.change(_toggle_colors, inputs=invert, outputs=logs_box)

    return demo


app = build_app()

if __name__ == "__main__":
    setup_logging(settings.log_level)
    port = int(os.getenv("PORT", "7860"))
    app.launch(server_name="0.0.0.0", server_port=port)
