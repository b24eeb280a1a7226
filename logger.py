# logger.py

# This will hold a reference to the gradient field currently on display.
_gradient_field = None

def set_gradient_field(field):
    """Sets the global gradient field for the logger to use."""
    global _gradient_field
    _gradient_field = field

def log(message):
    """Prints a message tagged with the active field if one is populated."""
    # Check if a field has been registered and its gradients are drawn.
    if _gradient_field is not None and _gradient_field.is_populated:
        size = _gradient_field.size
        seed = _gradient_field.seed

        # Format the context string.
        context_str = f"[Field {size}x{size} seed={seed}]"
        print(f"{context_str} {message}")
    else:
        # For messages logged before any field is ready.
        print(f"[Setup] {message}")
