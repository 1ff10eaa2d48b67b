"""Pull request snapshot, labels and merge validations."""
