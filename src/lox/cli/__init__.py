"""Command line front end for Lox."""
