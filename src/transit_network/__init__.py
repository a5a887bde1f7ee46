"""Transportation network model with a line-oriented text file format."""
