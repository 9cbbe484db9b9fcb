"""Name-generation pipeline: validation, prompting, completion and extraction."""
