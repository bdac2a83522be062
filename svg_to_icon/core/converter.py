"""
File conversion pipeline turning SVG files into icon component files.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import pandas as pd
from tqdm import tqdm

from svg_to_icon.core.extractor import MarkupExtractor, NotSvg, ViewBox
from svg_to_icon.core.generator import ComponentGenerator, format_viewbox
from svg_to_icon.core.validator import MarkupValidator
from svg_to_icon.errors import InvalidInputError, InvalidSvgContentError
from svg_to_icon.utils.io import load_svg, save_component

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"

STATUS_CREATED = "created"
STATUS_SKIPPED = "skipped"
STATUS_ERROR = "error"


@dataclass
class ConversionResult:
    """Outcome of converting one SVG file."""
    source: Path
    status: str
    output: Optional[Path] = None
    component_name: Optional[str] = None
    view_box: Optional[ViewBox] = None
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the result into a table row."""
        return {
            "source": str(self.source),
            "output": str(self.output) if self.output else None,
            "component": self.component_name,
            "status": self.status,
            "view_box": format_viewbox(self.view_box) if self.view_box else None,
            "warnings": "; ".join(self.warnings),
            "error": self.error,
        }


class SVGConverter:
    """
    Converts SVG files into icon component files.

    This class handles the complete conversion of a file:
    1. Reading the SVG source
    2. Extracting its viewBox and inner markup
    3. Checking the markup can be embedded
    4. Generating the component source
    5. Confirming before an existing file is replaced
    6. Writing the component next to the source or into an output directory
    """

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        overwrite: bool = False,
        confirm_overwrite: Optional[Callable[[str], bool]] = None,
        check_markup: bool = True,
        extractor: Optional[MarkupExtractor] = None,
        generator: Optional[ComponentGenerator] = None,
        validator: Optional[MarkupValidator] = None,
    ):
        """
        Initialize the converter.

        Args:
            output_dir: Directory for generated files (defaults to each source's directory)
            overwrite: Replace existing files without asking
            confirm_overwrite: Called with the file name when it already exists;
                returns True to replace it
            check_markup: Whether to check inner markup and report warnings
            extractor: Markup extractor to use
            generator: Component generator to use
            validator: Markup validator to use
        """
        self.output_dir = Path(output_dir) if output_dir else None
        self.overwrite = overwrite
        self.confirm_overwrite = confirm_overwrite
        self.check_markup = check_markup
        self.extractor = extractor or MarkupExtractor()
        self.generator = generator or ComponentGenerator()
        self.validator = validator or MarkupValidator()

    def resolve_input(self, path: Union[str, Path]) -> Path:
        """
        Check that a path names an existing SVG file.

        Args:
            path: Candidate input path

        Returns:
            The path as a Path object
        """
        path = Path(path)
        if not str(path).endswith(SVG_SUFFIX):
            raise InvalidInputError("Please provide an SVG file and try again")
        if not path.is_file():
            raise InvalidInputError(f"SVG file not found: {path}")
        return path

    def convert_file(self, path: Union[str, Path]) -> ConversionResult:
        """
        Convert one SVG file into a component file.

        Args:
            path: Path to the SVG file

        Returns:
            ConversionResult with status 'created' or 'skipped'
        """
        source = self.resolve_input(path)
        logger.debug(f"Processing SVG file: {source}")

        svg_content = load_svg(source)
        base_name = source.name[:-len(SVG_SUFFIX)]

        graphic = self.extractor.extract(svg_content)
        if isinstance(graphic, NotSvg):
            logger.debug(f"{source}: {graphic.reason.value} ({graphic.detail})")
            raise InvalidSvgContentError(graphic)

        result = ConversionResult(
            source=source,
            status=STATUS_SKIPPED,
            component_name=self.generator.component_name(base_name),
            view_box=graphic.view_box,
        )

        if self.check_markup:
            is_valid, message = self.validator.validate(graphic.inner_content, graphic.namespaces)
            if not is_valid:
                logger.warning(f"{source.name}: {message}")
                result.warnings.append(message)

        component_code = self.generator.generate(base_name, graphic)
        file_name = self.generator.output_file_name(base_name)
        output_path = (self.output_dir or source.parent) / file_name
        result.output = output_path

        if output_path.exists() and not self._may_replace(file_name):
            logger.info(f"Skipped existing file: {file_name}")
            return result

        save_component(component_code, output_path)
        result.status = STATUS_CREATED
        logger.info(f"Successfully created React component: {file_name}")
        return result

    def convert_directory(
        self, directory: Union[str, Path], recursive: bool = False
    ) -> pd.DataFrame:
        """
        Convert every SVG file in a directory.

        Failures are recorded per file and do not stop the run.

        Args:
            directory: Directory containing SVG files
            recursive: Whether to descend into subdirectories

        Returns:
            DataFrame with one row per SVG file
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise InvalidInputError(f"Directory not found: {directory}")

        pattern = f"**/*{SVG_SUFFIX}" if recursive else f"*{SVG_SUFFIX}"
        sources = sorted(p for p in directory.glob(pattern) if p.is_file())
        logger.info(f"Found {len(sources)} SVG files in {directory}")

        results = []
        for source in tqdm(sources, desc="Converting SVGs", disable=not sources):
            try:
                results.append(self.convert_file(source))
            except Exception as e:
                logger.error(f"Error converting {source}: {e}")
                results.append(ConversionResult(source=source, status=STATUS_ERROR, error=str(e)))

        return results_frame(results)

    def _may_replace(self, file_name: str) -> bool:
        if self.overwrite:
            return True
        if self.confirm_overwrite is None:
            return False
        return bool(self.confirm_overwrite(file_name))


def results_frame(results: List[ConversionResult]) -> pd.DataFrame:
    """Build a results table, keeping its columns when there are no rows."""
    columns = list(ConversionResult(source=Path(), status=STATUS_SKIPPED).to_dict())
    return pd.DataFrame([r.to_dict() for r in results], columns=columns)


def summarize(results_df: pd.DataFrame) -> Dict[str, int]:
    """
    Count conversion outcomes.

    Args:
        results_df: DataFrame returned by SVGConverter.convert_directory

    Returns:
        Dictionary with total, created, skipped and error counts
    """
    counts = results_df["status"].value_counts() if len(results_df) else {}
    return {
        "total": len(results_df),
        "created": int(counts.get(STATUS_CREATED, 0)),
        "skipped": int(counts.get(STATUS_SKIPPED, 0)),
        "error": int(counts.get(STATUS_ERROR, 0)),
    }
