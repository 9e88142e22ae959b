"""TechOps storefront: catalog, cart, checkout simulation and contact form."""
