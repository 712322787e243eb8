"""Domain layer for pennywise application.

Services are imported from their modules (``pennywise.domain.transaction``
and so on); importing them here would make ``pennywise.database`` and this
package import each other.
"""
