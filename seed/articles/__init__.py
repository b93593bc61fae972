"""Built-in article definitions, one module per article."""
