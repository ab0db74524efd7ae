"""Department and Seller form sessions for the sales desk desktop client."""
