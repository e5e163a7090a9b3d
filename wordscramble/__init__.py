"""Word Scramble: make words from the letters of a root word."""
