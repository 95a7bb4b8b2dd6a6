"""One module per display kind; importing a module registers its renderer."""
