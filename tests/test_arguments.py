"""Unit tests for kvim.arguments."""

from kvim.arguments import compose_arguments, init_script_path


class TestInitScriptPath:
    def test_directory_gets_init_lua(self, tmp_path):
        assert init_script_path(tmp_path) == tmp_path / "init.lua"

    def test_file_is_used_as_is(self, tmp_path):
        script = tmp_path / "custom.lua"
        script.write_text("-- koala")
        assert init_script_path(script) == script


class TestComposeArguments:
    def test_directory_config(self, tmp_path):
        assert compose_arguments(tmp_path, False, []) == ["-u", str(tmp_path / "init.lua")]

    def test_file_config(self, tmp_path):
        script = tmp_path / "init.lua"
        script.write_text("")
        assert compose_arguments(script, False, []) == ["-u", str(script)]

    def test_pass_through_args_appended_verbatim(self, tmp_path):
        argv = compose_arguments(tmp_path, False, ["-R", "my file.txt"])
        assert argv == ["-u", str(tmp_path / "init.lua"), "-R", "my file.txt"]

    def test_special_mode_drops_pass_through_args(self, tmp_path):
        argv = compose_arguments(tmp_path, True, ["log", "main"])
        assert argv == ["-u", str(tmp_path / "init.lua")]
