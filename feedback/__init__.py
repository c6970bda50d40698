# Pulse Feedback
