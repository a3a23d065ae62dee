"""Grid snake: fixed-cadence simulation core plus a pygame front end."""
