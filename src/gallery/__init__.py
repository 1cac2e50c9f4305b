"""Image listing and landing-page state for the Horizon gallery."""
