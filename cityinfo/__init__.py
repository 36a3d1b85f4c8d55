"""City info backend: cities and their points of interest."""
