"""
Sales Domain - sale records (Venta) of customized devices.
"""
