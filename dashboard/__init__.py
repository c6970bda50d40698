# Pulse Dashboard
