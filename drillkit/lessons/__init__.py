"""Worked solutions for the course topics."""