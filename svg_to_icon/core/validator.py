"""
Markup checks for inner SVG content before it is embedded in a component.
"""
import logging
from typing import Iterable, Optional, Tuple

from defusedxml import ElementTree
from defusedxml.common import DefusedXmlException

from svg_to_icon.config.default import DEFAULT_CONFIG

logger = logging.getLogger(__name__)

FRAGMENT_ROOT = "fragment"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"


class MarkupValidator:
    """
    Checks that inner SVG markup can be embedded as component children.

    The markup is only inspected, never rewritten. Problems are reported to
    the caller, which decides whether to warn about them.
    """

    def __init__(self, max_markup_size: int = DEFAULT_CONFIG["max_markup_size"]):
        """
        Initialize the markup validator.

        Args:
            max_markup_size: Maximum allowed size of the inner markup in bytes
        """
        self.max_markup_size = max_markup_size

    def validate(
        self,
        inner_content: str,
        namespaces: Iterable[Tuple[str, str]] = (),
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate an inner markup fragment.

        Args:
            inner_content: Markup found between the <svg> tags
            namespaces: (prefix, uri) pairs declared on the <svg> root, so
                prefixed attributes such as inkscape:label stay bound

        Returns:
            Tuple of (is_valid: bool, error_message: Optional[str])
        """
        markup_size = len(inner_content.encode('utf-8'))
        if markup_size > self.max_markup_size:
            return False, f"Markup exceeds allowed size: {markup_size} bytes (max: {self.max_markup_size})"

        if not inner_content:
            return True, None

        declared = {"xlink": XLINK_NAMESPACE}
        declared.update(namespaces)
        declarations = "".join(f' xmlns:{prefix}="{uri}"' for prefix, uri in declared.items())

        # Fragments may hold several top-level nodes and prefixed attributes
        wrapped = (
            f'<{FRAGMENT_ROOT} xmlns="{SVG_NAMESPACE}"{declarations}>'
            f'{inner_content}</{FRAGMENT_ROOT}>'
        )

        try:
            tree = ElementTree.fromstring(
                wrapped.encode('utf-8'),
                forbid_dtd=True,
                forbid_entities=True,
                forbid_external=True,
            )
        except DefusedXmlException as e:
            return False, f"Forbidden XML construct: {e}"
        except ElementTree.ParseError as e:
            return False, f"Invalid XML: {str(e)}"

        for element in tree.iter():
            tag_name = element.tag.split('}')[-1]
            if tag_name.lower() == 'script':
                return False, "Script elements cannot be embedded in a component"

            for attr in element.attrib:
                attr_name = attr.split('}')[-1]
                if attr_name.lower().startswith('on'):
                    return False, f"Event handler attribute not allowed: {attr_name} on element {tag_name}"

        return True, None
