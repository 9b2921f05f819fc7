"""Tests for the document-wide variable report."""

import asyncio

import pytest

from varbind.model import Color, ResolvedType, Variable, VariableAlias
from varbind.report.variables import (
    GlobalVariableReporter, count_alias_usage, parse_variable_name
)
from varbind.store import InMemoryVariableStore


def report(variables):
    reporter = GlobalVariableReporter(InMemoryVariableStore(variables))
    return asyncio.run(reporter.report_all(variables))


class TestNameSplitting:
    """Names split into group and leaf on '/'."""

    @pytest.mark.parametrize('full_name, expected', [
        ('colors/brand/primary', ('colors/brand', 'primary')),
        ('colors/red', ('colors', 'red')),
        ('spacing-4', ('Unknown', 'spacing-4')),
        ('', ('Unknown', '')),
    ])
    def test_parse_variable_name(self, full_name, expected):
        assert parse_variable_name(full_name) == expected


class TestVariableReport:
    """One row per variable with one-hop alias values and usage counts."""

    def make_variables(self):
        return [
            Variable('A', 'colors/base/red', ResolvedType.COLOR, {'m': Color(1, 0, 0, 1)}),
            Variable('B', 'colors/semantic/danger', ResolvedType.COLOR, {'m': VariableAlias('A')}),
            Variable('C', 'colors/semantic/error', ResolvedType.COLOR, {'m': VariableAlias('A')}),
        ]

    def test_usage_counts_direct_aliases(self):
        rows = report(self.make_variables())
        assert [row.usage_count for row in rows] == [2, 0, 0]

    def test_alias_rows_resolve_target_first_mode(self):
        rows = report(self.make_variables())
        assert rows[1].value == '#ff0000'
        assert rows[1].is_alias is True
        assert rows[0].is_alias is False

    def test_order_is_preserved(self):
        rows = report(list(reversed(self.make_variables())))
        assert [row.id for row in rows] == ['C', 'B', 'A']

    def test_row_serialization(self):
        rows = report(self.make_variables())
        assert rows[1].to_dict() == {
            'id': 'B',
            'group': 'colors/semantic',
            'name': 'danger',
            'type': 'COLOR',
            'value': '#ff0000',
            'alias': 'Yes',
            'usageCount': 0,
        }
        assert rows[0].to_dict()['alias'] == 'No'

    def test_dangling_alias_is_unknown(self):
        rows = report([Variable('X', 'x', ResolvedType.FLOAT, {'m': VariableAlias('gone')})])
        assert rows[0].value == 'Unknown'
        assert rows[0].is_alias is True

    def test_only_one_alias_hop_is_followed(self):
        rows = report([
            Variable('A', 'a', ResolvedType.FLOAT, {'m': 4}),
            Variable('B', 'b', ResolvedType.FLOAT, {'m': VariableAlias('A')}),
            Variable('C', 'c', ResolvedType.FLOAT, {'m': VariableAlias('B')}),
        ])
        assert [row.value for row in rows] == ['4', '4', 'Unknown']
        assert [row.usage_count for row in rows] == [1, 1, 0]

    def test_only_first_mode_counts_for_usage(self):
        variables = [
            Variable('A', 'a', ResolvedType.FLOAT, {'m': 4}),
            Variable('B', 'b', ResolvedType.FLOAT, {'m': 2, 'n': VariableAlias('A')}),
        ]
        assert count_alias_usage(variables)['A'] == 0

    def test_self_alias_is_not_counted(self):
        variables = [Variable('A', 'a', ResolvedType.FLOAT, {'m': VariableAlias('A')})]
        assert report(variables)[0].usage_count == 0

    def test_variable_without_modes(self):
        row = report([Variable('E', 'empty', ResolvedType.STRING, {})])[0]
        assert row.value == 'Unknown'
        assert row.is_alias is False

    def test_defaults_to_store_variables(self):
        variables = self.make_variables()
        reporter = GlobalVariableReporter(InMemoryVariableStore(variables))
        rows = asyncio.run(reporter.report_all())
        assert [row.id for row in rows] == ['A', 'B', 'C']
