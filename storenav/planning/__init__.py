"""Grid search, instruction generation and multi-stop route assembly."""
