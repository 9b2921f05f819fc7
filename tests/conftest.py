"""Shared fixtures: a small design document on disk."""

import pytest


SAMPLE_DOCUMENT = """
name: Sample
variables:
  - id: VariableID:1:1
    name: colors/base/red
    resolvedType: COLOR
    valuesByMode:
      1:0: {r: 1, g: 0, b: 0, a: 1}
      1:1: {r: 0.5, g: 0, b: 0, a: 0.5}
  - id: VariableID:1:2
    name: colors/semantic/danger
    resolvedType: COLOR
    valuesByMode:
      1:0: {type: VARIABLE_ALIAS, id: "VariableID:1:1"}
      1:1: {type: VARIABLE_ALIAS, id: "VariableID:1:1"}
  - id: VariableID:2:1
    name: spacing-4
    resolvedType: FLOAT
    valuesByMode:
      2:0: 16
  - id: VariableID:3:1
    name: type/family
    resolvedType: STRING
    valuesByMode:
      3:0: Inter
nodes:
  - id: "10:1"
    name: Alert
    type: FRAME
    resolvedVariableModes:
      VariableCollectionId:1: "1:1"
    boundVariables:
      fills:
        - {type: VARIABLE_ALIAS, id: "VariableID:1:2"}
      itemSpacing: {type: VARIABLE_ALIAS, id: "VariableID:2:1"}
    children:
      - id: "10:2"
        name: Message
        type: TEXT
        styledTextSegments:
          - start: 0
            end: 7
            boundVariables:
              fontFamily: {type: VARIABLE_ALIAS, id: "VariableID:3:1"}
      - id: "10:3"
        name: Icon
        type: VECTOR
        boundVariables:
          fills:
            - {type: VARIABLE_ALIAS, id: "VariableID:9:9"}
"""


@pytest.fixture
def document_file(tmp_path):
    """Write the sample document and return its path."""
    path = tmp_path / 'document.yaml'
    path.write_text(SAMPLE_DOCUMENT)
    return path
