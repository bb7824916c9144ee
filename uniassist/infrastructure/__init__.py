"""Infrastructure: exceptions, repositories and catalog providers."""
