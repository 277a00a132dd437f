"""Stock to source link management."""
