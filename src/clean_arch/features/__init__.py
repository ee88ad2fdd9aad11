"""Feature packages, each laid out in Clean Architecture layers."""
