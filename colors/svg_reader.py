import logging
import xml.etree.ElementTree as ET
from typing import Optional, Tuple, Union

from colors.color_utils import to_hex_color
from config.field_policy import DEFAULT_COLOR


logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _fill_of(element: ET.Element) -> Optional[str]:
    """style="fill: ..." 이 fill 속성보다 우선한다."""
    style = element.get("style") or ""
    for declaration in style.split(";"):
        name, _, value = declaration.partition(":")
        if name.strip() == "fill" and value.strip():
            return value.strip()
    fill = element.get("fill")
    return fill.strip() if fill else None


def find_entity_path(
    identifier: str, svg: ET.Element
) -> Optional[Tuple[ET.Element, ET.Element]]:
    """data-iso=identifier 요소 중 path를 가진 첫 요소와 그 path."""
    for element in svg.iter():
        if element.get("data-iso") != identifier:
            continue
        for child in element.iter():
            if child is not element and _local_name(child.tag) == "path":
                return element, child
    return None


def get_entity_color(identifier: str, svg: Union[ET.Element, str, None]) -> str:
    """data-iso=identifier 그룹의 path fill 색을 hex로. 실패하면 기본 회색."""
    if svg is None or not identifier:
        return DEFAULT_COLOR

    try:
        root = ET.fromstring(svg) if isinstance(svg, str) else svg
        found = find_entity_path(identifier, root)
        if found is None:
            return DEFAULT_COLOR
        group, path = found

        fill = _fill_of(path) or _fill_of(group)
        return to_hex_color(fill)
    except (ET.ParseError, AttributeError, TypeError) as exc:
        logger.warning("Failed to get color for entity %s: %s", identifier, exc)
        return DEFAULT_COLOR
