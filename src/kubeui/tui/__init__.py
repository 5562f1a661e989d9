"""Terminal user interface: view engine, components and applications."""
