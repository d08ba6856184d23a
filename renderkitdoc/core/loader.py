"""
Config Tree Loader
==================

Load a render-kit Config Tree from a YAML or JSON document and validate it
with Cerberus before building the Pydantic models.

Document shape::

    renderKits:
      - id: HTML_BASIC
        descriptions: [{lang: "", text: "..."}]
        renderers:
          - componentFamily: javax.faces.Command
            rendererType: javax.faces.Button
            rendersChildren: false
            descriptions: [...]
            attributes:
              - name: value
                attributeClass: java.lang.Object
                defaultValue: null
                ignoredByRenderer: false
                passThrough: false
                descriptions: [...]
"""

from typing import Any, Dict, List, Set, Tuple
from pathlib import Path
import yaml  # type: ignore[import-untyped]
from cerberus import Validator  # type: ignore[import-untyped]
from pydantic import ValidationError

from renderkitdoc.config.logging import get_logger
from renderkitdoc.core.exceptions import ConfigTreeLoadError
from renderkitdoc.models.schemas import FacesConfig, LoadResult

logger = get_logger(__name__)


class ConfigTreeValidator:
    """Config Tree validation using Cerberus schemas."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(component="validator")  # structlog.BoundLoggerBase
        self._setup_schemas()

    def _setup_schemas(self) -> None:
        """Setup validation schemas."""
        self.descriptions_schema = {
            "type": "list",
            "default": [],
            "schema": {
                "type": "dict",
                "schema": {
                    "lang": {"type": "string", "nullable": True},
                    "text": {"type": "string", "required": True},
                },
            },
        }

        self.attribute_schema = {
            "name": {"type": "string", "required": True, "empty": False},
            "attributeClass": {"type": "string", "required": True, "empty": False},
            "defaultValue": {"type": "string", "nullable": True},
            "ignoredByRenderer": {"type": "boolean", "default": False},
            "passThrough": {"type": "boolean", "default": False},
            "descriptions": self.descriptions_schema,
        }

        self.renderer_schema = {
            "componentFamily": {"type": "string", "required": True, "empty": False},
            "rendererType": {"type": "string", "required": True, "empty": False},
            "rendersChildren": {"type": "boolean", "default": False},
            "descriptions": self.descriptions_schema,
            "attributes": {
                "type": "list",
                "default": [],
                "schema": {"type": "dict", "schema": self.attribute_schema},
            },
        }

        self.render_kit_schema = {
            "id": {"type": "string", "required": True, "empty": False},
            "descriptions": self.descriptions_schema,
            "renderers": {
                "type": "list",
                "required": True,
                "empty": False,
                "schema": {"type": "dict", "schema": self.renderer_schema},
            },
        }

        self.document_schema: Dict[str, Any] = {
            "renderKits": {
                "type": "list",
                "required": True,
                "schema": {"type": "dict", "schema": self.render_kit_schema},
            },
        }

    def validate_document(self, data: Any) -> tuple[bool, List[str], List[str]]:
        """
        Validate Config Tree document structure.

        Args:
            data: Document data to validate

        Returns:
            Tuple of (is_valid, errors, warnings)
        """
        if not isinstance(data, dict):
            return False, [f"Document must be a mapping, got {type(data).__name__}"], []

        validator = Validator(self.document_schema)  # type: ignore[misc]
        validator.allow_unknown = True  # type: ignore[attr-defined]

        is_valid = validator.validate(data)  # type: ignore[misc]
        errors: List[str] = []
        warnings: List[str] = []

        if not is_valid:
            errors.extend(self._format_validation_errors(validator.errors))  # type: ignore[attr-defined]
            return False, errors, warnings

        custom_errors, custom_warnings = self._perform_custom_validations(data)
        errors.extend(custom_errors)
        warnings.extend(custom_warnings)

        return len(errors) == 0, errors, warnings

    def normalized(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Return the document with schema defaults filled in."""
        validator = Validator(self.document_schema)  # type: ignore[misc]
        validator.allow_unknown = True  # type: ignore[attr-defined]
        return validator.normalized(data)  # type: ignore[no-any-return]

    def _format_validation_errors(self, errors: Any, path: str = "") -> List[str]:
        """Format Cerberus validation errors into readable messages."""
        formatted_errors: List[str] = []

        for field, error_info in errors.items():
            current_path = f"{path}.{field}" if path else str(field)

            if isinstance(error_info, list):
                for error in error_info:
                    if isinstance(error, dict):
                        formatted_errors.extend(self._format_validation_errors(error, current_path))
                    else:
                        formatted_errors.append(f"{current_path}: {error}")
            elif isinstance(error_info, dict):
                formatted_errors.extend(self._format_validation_errors(error_info, current_path))

        return formatted_errors

    def _perform_custom_validations(self, data: Dict[str, Any]) -> tuple[List[str], List[str]]:
        """Check uniqueness rules and flag descriptions the summary cannot cut."""
        errors: List[str] = []
        warnings: List[str] = []
        kit_ids: Set[str] = set()

        for i, kit in enumerate(data["renderKits"]):
            path = f"renderKits[{i}]"
            if kit["id"] in kit_ids:
                errors.append(f"{path}: Duplicate render-kit id '{kit['id']}'")
            kit_ids.add(kit["id"])

            keys: Set[Tuple[str, str]] = set()
            for j, renderer in enumerate(kit["renderers"]):
                renderer_path = f"{path}.renderers[{j}]"
                key = (renderer["componentFamily"], renderer["rendererType"])
                if key in keys:
                    errors.append(f"{renderer_path}: Duplicate renderer {key[0]}/{key[1]}")
                keys.add(key)

                for description in renderer.get("descriptions") or []:
                    text = description.get("text") or ""
                    if not description.get("lang") and text and "." not in text:
                        warnings.append(
                            f"{renderer_path}: Default description has no '.', "
                            "summary generation will fail"
                        )

        return errors, warnings


class ConfigTreeLoader:
    """YAML/JSON Config Tree loader; JSON documents load as YAML."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(loader="yaml")  # structlog.BoundLoggerBase
        self.validator = ConfigTreeValidator()

    def load(self, path: Path) -> LoadResult:
        """
        Load a Config Tree from a file.

        Args:
            path: YAML or JSON document

        Returns:
            LoadResult containing the Config Tree or errors
        """
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            error_msg = f"Cannot read {path}: {e}"
            self.logger.error("Config Tree loading failed", error=error_msg)
            return LoadResult(success=False, errors=[error_msg])

        self.logger.info("Loading Config Tree", path=str(path))
        return self.parse(content)

    def parse(self, content: str) -> LoadResult:
        """
        Parse Config Tree content.

        Args:
            content: Raw YAML or JSON text

        Returns:
            LoadResult containing the Config Tree or errors
        """
        try:
            raw_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            error_msg = f"Invalid YAML syntax: {e}"
            self.logger.error("Config Tree parsing failed", error=error_msg)
            return LoadResult(success=False, errors=[error_msg])

        is_valid, errors, warnings = self.validator.validate_document(raw_data)
        if not is_valid:
            self.logger.error("Config Tree validation failed", errors=len(errors))
            return LoadResult(success=False, errors=errors, warnings=warnings)

        try:
            config = FacesConfig.model_validate(self.validator.normalized(raw_data))
        except ValidationError as e:
            error_msg = f"Config Tree conversion failed: {e}"
            self.logger.error("Config Tree conversion failed", error=error_msg)
            return LoadResult(success=False, errors=[error_msg], warnings=warnings)

        for warning in warnings:
            self.logger.warning("Config Tree warning", warning=warning)

        self.logger.info(
            "Config Tree loaded",
            render_kits=len(config.render_kits),
            renderers=sum(len(kit.renderers) for kit in config.render_kits),
        )
        return LoadResult(success=True, config=config, warnings=warnings)


def load_or_raise(path: Path) -> FacesConfig:
    """
    Load a Config Tree, raising on failure.

    Raises:
        ConfigTreeLoadError: If the document cannot be read, parsed or validated
    """
    result = ConfigTreeLoader().load(path)
    if not result.success or result.config is None:
        raise ConfigTreeLoadError(f"Cannot load Config Tree from {path}", result.errors)
    return result.config
