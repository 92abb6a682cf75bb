"""Commands that control the shell session."""
