"""svgelements adapter: bbox geométrico del documento exportado.

Se usa como chequeo independiente del árbol en memoria: el harness CLI lo
reporta y los tests lo usan para validar que los paths generados parsean.

Returns a dict like:
- bbox: (x0, y0, x1, y1) or None
- doc_size: [w, h] (optional)
- error: str (optional)
"""

from __future__ import annotations

import io
from typing import Any, Dict, Optional, Tuple

from svgelements import SVG, Path as SvgPath

BBoxXYXY = Tuple[float, float, float, float]


def _safe_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        # Length-like objects might store a numeric `.value`
        try:
            return float(getattr(v, "value"))
        except (AttributeError, TypeError, ValueError):
            return None


def path_bbox(d: str) -> Optional[BBoxXYXY]:
    """BBox de un atributo `d` (sin transform)."""
    b = SvgPath(d).bbox()
    if b is None:
        return None
    return (float(b[0]), float(b[1]), float(b[2]), float(b[3]))


def compute_document_bbox(svg_text: str, *, ppi: float = 96.0, reify: bool = True) -> Dict[str, Any]:
    """Bbox del documento completo (transforms aplicados) usando svgelements."""
    try:
        svg = SVG.parse(io.StringIO(svg_text), ppi=float(ppi), reify=bool(reify))
    except Exception as e:  # svgelements levanta tipos variados ante XML raro
        return {"bbox": None, "error": f"{type(e).__name__}: {e}"}

    bbox = None
    b = svg.bbox(with_stroke=False)
    if b is not None:
        bbox = (float(b[0]), float(b[1]), float(b[2]), float(b[3]))

    doc_w = _safe_float(getattr(svg, "width", None))
    doc_h = _safe_float(getattr(svg, "height", None))
    doc_size = [doc_w, doc_h] if doc_w is not None and doc_h is not None else None

    return {"bbox": bbox, "doc_size": doc_size}
