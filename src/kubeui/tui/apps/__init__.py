"""Applications built on the view engine."""
