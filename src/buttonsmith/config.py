from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExportSettings:
    selector: str = ".btn"
    ring_surface: str = "var(--bg-color, white)"  # inner layer of the focus ring
    json_indent: int = 2
    preview_element_id: str = "preview-button"
