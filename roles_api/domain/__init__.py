"""Domain layer: exceptions shared by application and presentation."""
