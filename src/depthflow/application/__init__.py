"""Application-level support shared by the depthflow packages."""
