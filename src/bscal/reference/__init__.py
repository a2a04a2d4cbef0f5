"""Calendar reference data and its loaders."""
