"""Input and output formats for depthflow graphs."""
