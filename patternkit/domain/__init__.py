"""Domain layer - the five pattern modules and their shared kernel.

Modules are independent leaves:
    - factory_method: Creator/Product
    - abstract_factory: matched product families
    - builder: Builder/Director
    - visitor: double dispatch over a closed component set
    - command: Command/Receiver/Invoker
"""
