import io
import json
import pytest
from pathlib import Path
from unittest.mock import patch

from deucerating.config.resolvers import default_log_dir, resolve_log_dir, read_answers
from deucerating.domain.exceptions import ValidationError


class TestLogDir:

    def test_default_log_dir_is_created(self, tmp_path):
        target = tmp_path / "logs" / "deucerating"
        with patch('deucerating.config.resolvers.user_log_dir', return_value=str(target)):
            result = default_log_dir()
        assert result == target
        assert target.is_dir()

    def test_explicit_log_file_wins(self, tmp_path):
        assert resolve_log_dir(tmp_path / "run.log") == tmp_path

    def test_falls_back_to_default(self, tmp_path):
        with patch('deucerating.config.resolvers.default_log_dir', return_value=tmp_path):
            assert resolve_log_dir(None) == tmp_path


class TestReadAnswers:

    def test_reads_file(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"experience": "1-2 years"}))
        assert read_answers(str(path)) == {"experience": "1-2 years"}

    @pytest.mark.parametrize("source", [None, "-"])
    def test_reads_stdin(self, source):
        stream = io.StringIO('{"has_dupr": "yes"}')
        assert read_answers(source, stdin=stream) == {"has_dupr": "yes"}

    def test_blank_input_is_empty_answers(self):
        assert read_answers("-", stdin=io.StringIO("  \n")) == {}

    def test_shape_not_checked(self):
        assert read_answers("-", stdin=io.StringIO("[1, 2]")) == [1, 2]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError) as exc_info:
            read_answers(str(tmp_path / "nope.json"))
        assert exc_info.value.field_name == "answers"

    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc_info:
            read_answers("-", stdin=io.StringIO("{oops"))
        assert "<stdin>" in exc_info.value.message
