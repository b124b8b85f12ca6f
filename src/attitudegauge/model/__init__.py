"""
The MODEL layer contains the gauge state and pure geometry helpers.
It has NO knowledge of the GUI (Qt) or of any drawing surface.
"""
