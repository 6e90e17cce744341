"""rerun: keep a base command line and re-run it with extra arguments."""
