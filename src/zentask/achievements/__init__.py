"""Static achievement catalog and the statistics tracker that unlocks them."""
