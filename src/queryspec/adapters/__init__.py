"""queryspec adapters: concrete query-building backends."""
