"""Design document loader with strict shape validation."""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set
import yaml

from varbind.exceptions import ValidationError, DocumentValidationError
from varbind.model import (
    ALIAS_TYPE,
    Binding,
    Color,
    Node,
    ResolvedType,
    TextSegment,
    Variable,
    VariableAlias,
    VariableValue,
)
from varbind.store import InMemoryVariableStore


logger = logging.getLogger(__name__)

_INT_TAG = 'tag:yaml.org,2002:int'


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps mode ids like '1:0' as strings instead of base-60 ints."""
    pass


# Drop the YAML 1.1 int resolver (which also matches sexagesimal '1:0') and
# register one that only knows binary, octal, decimal and hex.
PreservingLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _INT_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
PreservingLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r'''^(?:[-+]?0b[0-1_]+
                    |[-+]?0[0-7_]+
                    |[-+]?(?:0|[1-9][0-9_]*)
                    |[-+]?0x[0-9a-fA-F_]+)$''', re.X),
    list('-+0123456789')
)


@dataclass
class Document:
    """Snapshot of a design document: its variables and top-level nodes."""
    name: str = ""
    variables: List[Variable] = field(default_factory=list)
    nodes: List[Node] = field(default_factory=list)

    def find_node(self, node_id: str) -> Optional[Node]:
        """Find a node anywhere in the document by id."""
        stack = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            if node.id == node_id:
                return node
            if node.children:
                stack.extend(reversed(node.children))
        return None

    def create_store(self) -> InMemoryVariableStore:
        return InMemoryVariableStore(self.variables)


class DocumentLoader:
    """Loads and validates design document snapshots (YAML or JSON)."""

    KNOWN_FIELDS = {'name', 'variables', 'nodes'}
    VARIABLE_FIELDS = {'id', 'name', 'resolvedType', 'valuesByMode'}
    NODE_FIELDS = {
        'id', 'name', 'type', 'children', 'boundVariables',
        'resolvedVariableModes', 'styledTextSegments'
    }

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, document_path: Path) -> Document:
        """Load and validate a document file."""
        self.errors = []
        document_path = Path(document_path)
        try:
            with open(document_path, 'r') as f:
                if document_path.suffix.lower() == '.json':
                    raw = json.load(f)
                else:
                    raw = yaml.load(f, Loader=PreservingLoader)
        except (OSError, ValueError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load document: {e}")
            self._raise_validation_errors()

        return self.parse(raw)

    def parse(self, raw: Any) -> Document:
        """Validate an already-decoded document and build the model."""
        self.errors = []
        if raw is None or not isinstance(raw, dict):
            self._add_error("Document must be a YAML/JSON object")
            self._raise_validation_errors()

        for key in raw.keys():
            if key not in self.KNOWN_FIELDS:
                self._add_error(f"Unknown field '{key}'", path=str(key))

        name = raw.get('name', '')
        if not isinstance(name, str):
            self._add_error("'name' must be a string", path='name')
            name = ''

        variables = self._parse_variables(raw.get('variables', []))
        nodes = self._parse_nodes(raw.get('nodes', []), 'nodes')

        if self.errors:
            self._raise_validation_errors()

        logger.info(f"Loaded document with {len(variables)} variable(s) and {len(nodes)} top-level node(s)")
        return Document(name=name, variables=variables, nodes=nodes)

    def _parse_variables(self, raw_variables: Any) -> List[Variable]:
        if not isinstance(raw_variables, list):
            self._add_error("'variables' must be a list", path='variables')
            return []

        variables = []
        seen_ids: Set[str] = set()
        for i, raw in enumerate(raw_variables):
            path = f"variables[{i}]"
            if not isinstance(raw, dict):
                self._add_error("Variable must be a dictionary", path=path)
                continue

            for key in raw.keys():
                if key not in self.VARIABLE_FIELDS:
                    self._add_error(f"Unknown variable field '{key}'", path=path)

            var_id = raw.get('id')
            if not isinstance(var_id, str) or not var_id:
                self._add_error("Variable missing required string 'id'", path=path)
                continue
            if var_id in seen_ids:
                self._add_error(f"Duplicate variable id '{var_id}'", path=path)
                continue
            seen_ids.add(var_id)

            name = raw.get('name')
            if not isinstance(name, str):
                self._add_error(f"Variable '{var_id}' missing required string 'name'", path=path)
                continue

            try:
                resolved_type = ResolvedType(raw.get('resolvedType'))
            except ValueError:
                supported = [t.value for t in ResolvedType]
                self._add_error(
                    f"Variable '{var_id}' has unsupported resolvedType "
                    f"'{raw.get('resolvedType')}'. Supported: {supported}",
                    path=path
                )
                continue

            raw_modes = raw.get('valuesByMode', {})
            if not isinstance(raw_modes, dict):
                self._add_error(f"Variable '{var_id}' valuesByMode must be a dictionary", path=path)
                continue

            values_by_mode: Dict[str, VariableValue] = {}
            for mode_id, raw_value in raw_modes.items():
                value = self._parse_value(raw_value, f"{path}.valuesByMode.{mode_id}")
                if value is not None:
                    values_by_mode[str(mode_id)] = value

            variables.append(Variable(
                id=var_id,
                name=name,
                resolved_type=resolved_type,
                values_by_mode=values_by_mode
            ))

        return variables

    def _parse_value(self, raw: Any, path: str) -> Optional[VariableValue]:
        """Build a tagged value from its raw shape."""
        if isinstance(raw, (bool, int, float, str)):
            return raw

        if isinstance(raw, dict):
            if raw.get('type') == ALIAS_TYPE:
                return self._parse_alias(raw, path)
            if all(k in raw for k in ('r', 'g', 'b')):
                channels = {k: raw.get(k) for k in ('r', 'g', 'b', 'a') if k in raw}
                for k, v in channels.items():
                    if isinstance(v, bool) or not isinstance(v, (int, float)):
                        self._add_error(f"Color channel '{k}' must be a number", path=path)
                        return None
                return Color(**channels)

        self._add_error(f"Unsupported value {raw!r}", path=path)
        return None

    def _parse_alias(self, raw: Any, path: str) -> Optional[VariableAlias]:
        if not isinstance(raw, dict):
            self._add_error("Binding must be a dictionary", path=path)
            return None
        if raw.get('type', ALIAS_TYPE) != ALIAS_TYPE:
            self._add_error(f"Binding type must be '{ALIAS_TYPE}'", path=path)
            return None
        alias_id = raw.get('id')
        if not isinstance(alias_id, str) or not alias_id:
            self._add_error("Alias missing required string 'id'", path=path)
            return None
        return VariableAlias(id=alias_id)

    def _parse_bindings(self, raw: Any, path: str) -> Dict[str, Binding]:
        if not isinstance(raw, dict):
            self._add_error("boundVariables must be a dictionary", path=path)
            return {}

        bindings: Dict[str, Binding] = {}
        for prop, raw_binding in raw.items():
            prop_path = f"{path}.{prop}"
            if isinstance(raw_binding, list):
                aliases = [self._parse_alias(b, f"{prop_path}[{i}]") for i, b in enumerate(raw_binding)]
                bindings[prop] = [a for a in aliases if a is not None]
            else:
                alias = self._parse_alias(raw_binding, prop_path)
                if alias is not None:
                    bindings[prop] = alias
        return bindings

    def _parse_segment_bindings(self, raw: Any, path: str) -> Dict[str, VariableAlias]:
        """Parse segment bindings, dropping malformed ones instead of failing the document."""
        if not isinstance(raw, dict):
            logger.warning(f"Ignoring non-mapping boundVariables at {path}")
            return {}

        bindings: Dict[str, VariableAlias] = {}
        for prop, raw_binding in raw.items():
            if (isinstance(raw_binding, dict)
                    and raw_binding.get('type', ALIAS_TYPE) == ALIAS_TYPE
                    and isinstance(raw_binding.get('id'), str)
                    and raw_binding['id']):
                bindings[prop] = VariableAlias(id=raw_binding['id'])
            else:
                logger.warning(f"Ignoring malformed binding at {path}.{prop}: {raw_binding!r}")
        return bindings

    def _parse_nodes(self, raw_nodes: Any, path: str) -> List[Node]:
        if not isinstance(raw_nodes, list):
            self._add_error("must be a list", path=path)
            return []
        nodes = []
        for i, raw in enumerate(raw_nodes):
            node = self._parse_node(raw, f"{path}[{i}]")
            if node is not None:
                nodes.append(node)
        return nodes

    def _parse_node(self, raw: Any, path: str) -> Optional[Node]:
        if not isinstance(raw, dict):
            self._add_error("Node must be a dictionary", path=path)
            return None

        for key in raw.keys():
            if key not in self.NODE_FIELDS:
                self._add_error(f"Unknown node field '{key}'", path=path)

        for required in ('id', 'name', 'type'):
            if not isinstance(raw.get(required), str):
                self._add_error(f"Node missing required string '{required}'", path=path)
                return None

        node = Node(id=raw['id'], name=raw['name'], type=raw['type'])

        if 'children' in raw:
            node.children = self._parse_nodes(raw['children'], f"{path}.children")

        if 'boundVariables' in raw:
            node.bound_variables = self._parse_bindings(raw['boundVariables'], f"{path}.boundVariables")

        modes = raw.get('resolvedVariableModes', {})
        if isinstance(modes, dict):
            node.resolved_variable_modes = {str(k): str(v) for k, v in modes.items()}
        else:
            self._add_error("resolvedVariableModes must be a dictionary", path=path)

        segments = raw.get('styledTextSegments', [])
        if not isinstance(segments, list):
            self._add_error("styledTextSegments must be a list", path=path)
            segments = []
        for i, raw_segment in enumerate(segments):
            segment = self._parse_segment(raw_segment, f"{path}.styledTextSegments[{i}]")
            if segment is not None:
                node.text_segments.append(segment)

        return node

    def _parse_segment(self, raw: Any, path: str) -> Optional[TextSegment]:
        if not isinstance(raw, dict):
            self._add_error("Text segment must be a dictionary", path=path)
            return None

        start, end = raw.get('start'), raw.get('end')
        for label, offset in (('start', start), ('end', end)):
            if isinstance(offset, bool) or not isinstance(offset, int):
                self._add_error(f"Text segment '{label}' must be an integer", path=path)
                return None
        if end < start:
            self._add_error(f"Text segment end {end} precedes start {start}", path=path)
            return None

        bindings = self._parse_segment_bindings(raw.get('boundVariables', {}), f"{path}.boundVariables")
        return TextSegment(start=start, end=end, bound_variables=bindings)

    def _add_error(self, message: str, path: str = "", exit_code: int = 2):
        """Add validation error."""
        self.errors.append(ValidationError(message, path, exit_code))

    def _raise_validation_errors(self):
        """Raise DocumentValidationError with accumulated errors."""
        raise DocumentValidationError(self.errors)
