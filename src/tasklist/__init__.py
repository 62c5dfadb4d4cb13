"""tasklist - a local task list with priorities."""
