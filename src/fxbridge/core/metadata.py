"""Best-effort extraction of pixel dimensions from host metadata blobs.

Two independent parsers, tried in order. Neither failing is an error; it
only means the dimensions are unknown and the fit step is skipped.
"""
import logging
import re
from typing import Callable, List, Optional, Tuple

from lxml import etree

from fxbridge.core.fallback import probe
from fxbridge.core.models import MediaDimensions

logger = logging.getLogger(__name__)

STDIM_NS = "http://ns.adobe.com/xap/1.0/sType/Dimensions#"

VIDEO_INFO_RE = re.compile(r"VideoInfo[^>]*>(\d+)\s*x\s*(\d+)")
STDIM_W_RE = re.compile(r'stDim:w="(\d+)"')
STDIM_H_RE = re.compile(r'stDim:h="(\d+)"')


def _valid(width: int, height: int) -> Optional[MediaDimensions]:
    if width > 0 and height > 0:
        return MediaDimensions(width=width, height=height)
    return None


def dimensions_from_project_metadata(blob: Optional[str]) -> Optional[MediaDimensions]:
    if not blob:
        return None
    match = VIDEO_INFO_RE.search(str(blob))
    if not match:
        return None
    return _valid(int(match.group(1)), int(match.group(2)))


def _xmp_dimensions_xml(blob: str) -> Optional[MediaDimensions]:
    parser = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)
    root = etree.fromstring(blob.encode("utf-8"), parser)
    width_attr = f"{{{STDIM_NS}}}w"
    height_attr = f"{{{STDIM_NS}}}h"
    for node in root.iter():
        width = node.get(width_attr)
        height = node.get(height_attr)
        if width and height:
            return _valid(int(width), int(height))
    width_node = root.find(f".//{{{STDIM_NS}}}w")
    height_node = root.find(f".//{{{STDIM_NS}}}h")
    if width_node is not None and height_node is not None and width_node.text and height_node.text:
        return _valid(int(width_node.text.strip()), int(height_node.text.strip()))
    return None


def _xmp_dimensions_regex(blob: str) -> Optional[MediaDimensions]:
    width = STDIM_W_RE.search(blob)
    height = STDIM_H_RE.search(blob)
    if width and height:
        return _valid(int(width.group(1)), int(height.group(1)))
    return None


def dimensions_from_xmp(blob: Optional[str]) -> Optional[MediaDimensions]:
    if not blob:
        return None
    text = str(blob)
    found = probe(lambda: _xmp_dimensions_xml(text))
    if found is not None:
        return found
    return _xmp_dimensions_regex(text)


def resolve_dimensions(item: object) -> Optional[MediaDimensions]:
    """Read dimensions of an imported project item, project metadata first, then XMP."""
    strategies: List[Tuple[str, Callable[[], Optional[str]], Callable[[Optional[str]], Optional[MediaDimensions]]]] = [
        ("project metadata", lambda: item.getProjectMetadata(), dimensions_from_project_metadata),
        ("xmp metadata", lambda: item.getXMPMetadata(), dimensions_from_xmp),
    ]
    for label, read, parse in strategies:
        blob = probe(read)
        dimensions = probe(lambda: parse(blob))
        if dimensions is not None:
            logger.debug("dimensions from %s: %sx%s", label, dimensions.width, dimensions.height)
            return dimensions
    return None
