"""
Application layer - travel booking.

Use cases orchestrate the domain and talk to infrastructure only through the
ports in `interfaces/`.

Structure:
- use_cases/: one class per operation, each with an async `execute`
- interfaces/: repository and gateway ports
"""
