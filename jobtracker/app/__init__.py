"""HTTP API for the job tracker."""
