"""Tests for the varbind command-line interface."""

import json

import yaml

from varbind.cli.main import main


class TestInspectCommand:
    """inspect prints the binding report of the selected node."""

    def test_single_node_report(self, document_file, capsys):
        assert main(['inspect', str(document_file), '--node', '10:1']) == 0

        report = json.loads(capsys.readouterr().out)
        assert report['name'] == 'Alert'
        assert report['boundVariables'] == [
            # Context mode 1:1 of the aliased red is 50% alpha
            {'property': 'fills', 'name': 'colors/semantic/danger', 'value': '#80000080'},
            {'property': 'fills', 'name': 'Unknown', 'value': 'Unknown'},
            {'property': 'itemSpacing', 'name': 'spacing-4', 'value': '16'},
            {'property': 'fontFamily', 'name': 'type/family', 'value': 'Inter', 'range': [0, 7]},
        ]

    def test_no_node_prints_no_selection(self, document_file, capsys):
        assert main(['inspect', str(document_file)]) == 0
        assert json.loads(capsys.readouterr().out) == {'type': 'no-selection'}

    def test_several_nodes_print_no_selection(self, document_file, capsys):
        assert main(['inspect', str(document_file), '--node', '10:2', '--node', '10:3']) == 0
        assert json.loads(capsys.readouterr().out) == {'type': 'no-selection'}

    def test_unknown_node(self, document_file):
        assert main(['inspect', str(document_file), '--node', '99:9']) == 1

    def test_missing_document(self, tmp_path):
        assert main(['inspect', str(tmp_path / 'missing.yaml'), '--node', '1']) == 1

    def test_invalid_document(self, tmp_path):
        path = tmp_path / 'invalid.yaml'
        path.write_text("variables: {}\n")
        assert main(['inspect', str(path), '--node', '1']) == 2


class TestVariablesCommand:
    """variables prints one row per document variable."""

    def test_report_rows(self, document_file, capsys):
        assert main(['variables', str(document_file)]) == 0

        rows = json.loads(capsys.readouterr().out)
        assert [row['name'] for row in rows] == ['red', 'danger', 'spacing-4', 'family']
        assert rows[0]['usageCount'] == 1
        assert rows[1]['value'] == '#ff0000'
        assert rows[1]['alias'] == 'Yes'
        assert rows[2]['group'] == 'Unknown'

    def test_group_filter(self, document_file, capsys):
        assert main(['variables', str(document_file), '--group', 'colors/semantic']) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [row['id'] for row in rows] == ['VariableID:1:2']

    def test_yaml_output(self, document_file, capsys):
        assert main(['variables', str(document_file), '--format', 'yaml']) == 0
        rows = yaml.safe_load(capsys.readouterr().out)
        assert rows[3]['value'] == 'Inter'


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert 'varbind' in capsys.readouterr().out
