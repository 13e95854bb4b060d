"""Tests for the click CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from kakao_skill import __version__
from kakao_skill.l2_use_cases.reference_templates import REFERENCE_TEMPLATES, build_reference
from kakao_skill.l4_frameworks_and_drivers.cli import cli

BOGUS_ACTION_BODY = (
    '{"template":{"outputs":[{"simpleText":{"text":"a"}},{"basicCard":{"thumbnail":{"imageUrl":"u"},'
    '"buttons":[{"label":"x","action":"bogus"}]}}]},"version":"2.0"}'
)


class TestCliGroup:
    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config_file_is_usage_error(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ['-c', str(tmp_path / 'nope.yaml'), 'example'])
        assert result.exit_code == 2

    def test_invalid_config_value(self, tmp_path: Path):
        p = tmp_path / 'bad.yaml'
        p.write_text('decode:\n  unknown_button_action: "explode"\n', encoding='utf-8')
        result = CliRunner().invoke(cli, ['-c', str(p), 'example'])
        assert result.exit_code == 1
        assert 'Error:' in result.output

    def test_malformed_yaml(self, tmp_path: Path):
        p = tmp_path / 'bad.yaml'
        p.write_text('decode: [unclosed\n', encoding='utf-8')
        result = CliRunner().invoke(cli, ['-c', str(p), 'example'])
        assert result.exit_code == 1
        assert 'Error:' in result.output


class TestExampleCommand:
    def test_default_is_list_card(self):
        result = CliRunner().invoke(cli, ['example'])
        assert result.exit_code == 0
        assert result.output == build_reference('listcard').to_json() + '\n'

    def test_named_example(self):
        result = CliRunner().invoke(cli, ['example', 'itemcard'])
        assert result.exit_code == 0
        assert json.loads(result.output) == build_reference('itemcard').to_dict()

    def test_list(self):
        result = CliRunner().invoke(cli, ['example', '--list'])
        assert result.exit_code == 0
        assert result.output.split() == list(REFERENCE_TEMPLATES)

    def test_unknown_example(self):
        result = CliRunner().invoke(cli, ['example', 'nope'])
        assert result.exit_code == 1
        assert "Unknown example 'nope'" in result.output

    def test_indent_option(self):
        result = CliRunner().invoke(cli, ['--indent', '2', 'example', 'simpletext'])
        assert result.exit_code == 0
        assert '\n  "template"' in result.output
        assert json.loads(result.output) == build_reference('simpletext').to_dict()

    def test_indent_from_config(self, sample_config_yaml: Path):
        result = CliRunner().invoke(cli, ['-c', str(sample_config_yaml), 'example', 'simpletext'])
        assert result.exit_code == 0
        assert '\n  "template"' in result.output


class TestValidateCommand:
    def test_valid_body_from_stdin(self):
        body = build_reference('carousel-commerce').to_json()
        result = CliRunner().invoke(cli, ['validate', '-'], input=body)
        assert result.exit_code == 0
        assert result.output == body + '\n'

    def test_valid_body_from_file(self, tmp_path: Path):
        p = tmp_path / 'body.json'
        p.write_text(build_reference('basiccard').to_json(), encoding='utf-8')
        result = CliRunner().invoke(cli, ['validate', str(p)])
        assert result.exit_code == 0

    def test_canonicalizes_pretty_input(self):
        body = build_reference('listcard')
        result = CliRunner().invoke(cli, ['validate'], input=body.to_json(indent=4))
        assert result.exit_code == 0
        assert result.output == body.to_json() + '\n'

    def test_invalid_body_reports_path(self):
        result = CliRunner().invoke(cli, ['validate'], input='{"template":{"outputs":[]},"version":"2.0","x":1}')
        assert result.exit_code == 1
        assert 'x: Extra inputs are not permitted' in result.output

    def test_lenient_by_default(self):
        result = CliRunner().invoke(cli, ['validate'], input=BOGUS_ACTION_BODY)
        assert result.exit_code == 0
        assert '"action":"message"' in result.output

    def test_strict_flag(self):
        result = CliRunner().invoke(cli, ['--strict', 'validate'], input=BOGUS_ACTION_BODY)
        assert result.exit_code == 1
        assert 'template.outputs.1' in result.output
        assert "unknown button action 'bogus'" in result.output

    def test_strict_from_config(self, sample_config_yaml: Path):
        result = CliRunner().invoke(cli, ['-c', str(sample_config_yaml), 'validate'], input=BOGUS_ACTION_BODY)
        assert result.exit_code == 1

    def test_log_file(self, tmp_path: Path):
        log_path = tmp_path / 'logs' / 'kskill.log'
        result = CliRunner().invoke(cli, ['--log-file', str(log_path), 'validate'], input=BOGUS_ACTION_BODY)
        assert result.exit_code == 0
        content = log_path.read_text(encoding='utf-8')
        assert 'File logging started' in content
        assert 'unknown action' in content
        assert 'response accepted' in content


    def test_verbose_uses_configured_level(self, tmp_path: Path):
        p = tmp_path / 'quiet.yaml'
        p.write_text('logging:\n  level: "WARNING"\n', encoding='utf-8')
        result = CliRunner().invoke(cli, ['-c', str(p), '-v', 'validate'], input=BOGUS_ACTION_BODY)
        assert result.exit_code == 0
        assert 'unknown action' in result.output
        assert 'response accepted' not in result.output

    def test_verbose_at_debug(self, tmp_path: Path):
        p = tmp_path / 'loud.yaml'
        p.write_text('logging:\n  level: "DEBUG"\n', encoding='utf-8')
        result = CliRunner().invoke(cli, ['-c', str(p), '-v', 'validate'], input=BOGUS_ACTION_BODY)
        assert result.exit_code == 0
        assert 'response accepted' in result.output


class TestBenchCommand:
    def test_bench(self):
        result = CliRunner().invoke(cli, ['bench', '-n', '3', '-e', 'simpletext'])
        assert result.exit_code == 0
        assert result.output.startswith('simpletext: 3 iterations in ')
        assert 'bytes/body' in result.output

    def test_bench_with_decode(self):
        result = CliRunner().invoke(cli, ['bench', '-n', '2', '--decode'])
        assert result.exit_code == 0
        assert result.output.startswith('listcard: 2 iterations')

    def test_bench_unknown_example(self):
        result = CliRunner().invoke(cli, ['bench', '-e', 'nope'])
        assert result.exit_code == 1
        assert 'Unknown example' in result.output

    def test_bench_rejects_zero_iterations(self):
        result = CliRunner().invoke(cli, ['bench', '-n', '0'])
        assert result.exit_code == 2
