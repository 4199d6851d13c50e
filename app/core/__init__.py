"""Session workspace core: state, services and the controller."""
