"""schemats command line tool."""
