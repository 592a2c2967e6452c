"""
Exit codes for Pomodoro TUI.

The timer itself cannot fail; these codes only describe how the process
ended so that shell scripts wrapping ``pomodoro`` can tell the cases apart.
"""

# Success (including quitting with 'q' or Ctrl+C)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# The terminal could not be set up for the full-screen display
ERROR_TERMINAL = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_TERMINAL: "ERROR_TERMINAL",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer exited normally",
        ERROR_GENERAL: "A general error occurred",
        ERROR_TERMINAL: "Terminal is not interactive - run pomodoro in a real terminal",
    }
    return descriptions.get(code, "Unknown error")
