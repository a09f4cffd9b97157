"""Radio Bounded Context.

Responsible for aviation VHF frequencies and their channel plans:
- Value Objects: RadioFrequency
- Ports: FrequencyCodec (structured encoding)
"""
