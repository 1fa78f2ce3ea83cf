"""secstore core types, contracts and exceptions."""
