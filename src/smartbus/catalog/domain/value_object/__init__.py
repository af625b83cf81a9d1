from .service_class import ServiceClass as ServiceClass
