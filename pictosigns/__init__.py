"""pictosigns: catalog administration and order quotes for printed signage."""
