"""STL-style containers: fixed array, growable vector and doubly linked list."""