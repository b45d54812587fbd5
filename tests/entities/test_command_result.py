"""
Tests for the CommandResult outcome type.
"""

from jailfs.entities.command_result import CommandResult, ResultKind


class TestCommandResult:
    """Test cases for CommandResult."""

    def test_ok(self):
        """Test a successful result."""
        result = CommandResult.ok("done")

        assert result.kind is ResultKind.CONTINUE
        assert result.success is True
        assert result.should_exit is False
        assert result.message == "done"

    def test_fail(self):
        """Test a failed result."""
        result = CommandResult.fail("boom")

        assert result.success is False
        assert result.should_exit is False

    def test_terminate_is_not_an_error(self):
        """Test that terminating is distinct from failing."""
        result = CommandResult.terminate()

        assert result.should_exit is True
        assert result.success is True
        assert result.message == ""

    def test_fail_with_exit_message_does_not_terminate(self):
        """Test that the message text never drives control flow."""
        assert CommandResult.fail("exit").should_exit is False
