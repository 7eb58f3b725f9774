"""Clinical nutrition assessment domain."""
