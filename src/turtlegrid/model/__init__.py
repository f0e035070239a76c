"""
The MODEL layer contains pure data structures and the orientation algebra.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with Facings, Displacements and the remote command protocol.
"""
