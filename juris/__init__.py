"""Juris Gestão - backend de gestão de processos jurídicos."""
