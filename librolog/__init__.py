"""LibroLog: personal reading-log tracker."""
