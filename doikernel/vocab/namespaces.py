__all__ = (
    'DATACITE',
    'XML',
    'XML_NAMESPACES',
    'XSI',
)

DATACITE = 'http://datacite.org/schema/kernel-4'
XSI = 'http://www.w3.org/2001/XMLSchema-instance'
XML = 'http://www.w3.org/XML/1998/namespace'

# namespaces used in kernel-4 xml documents, by conventional prefix
XML_NAMESPACES = {
    'datacite': DATACITE,
    'xsi': XSI,
    'xml': XML,
}
