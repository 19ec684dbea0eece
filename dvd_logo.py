# dvd_logo.py
# Generated from assets/dvd_logo.png; regenerate with:
#   base64 -w 76 assets/dvd_logo.png
LOGO_PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAWgAAADDCAYAAACvSYtMAAAMq0lEQVR42u3d7ZHazBKGYYdABCpC"
    "IARCUAiEQAhkQAiEQAiEQAgbAiH42HWkelWY9S4GjaZ7rh/3n/NR5ZX6eWj1dPf86PqfPwAA9eEh"
    "AACDRgWsf7H/xeUXt1/8HLgN/9l++N94Vt4PGDQKCv80EfxXnBiB9wMGjfnZ3WVj3+U2/H89Q+8H"
    "DBozif/nizAB7wcMGhWKnwl4P2DQmKGmeXujAdzUPL0fMGi8h9MbxT9y9lzfxnmG93PyXBk0YmRn"
    "P2di6/m+zHbG9yOLZtBf8jM416Hn9HdGchgEFSnw9zM/G8J5jeuM72dPlww6u0F/xscQHL8PZFYV"
    "v9TLzM/BgVQdB4OPuNAlg27VoB/VZGs0q1sBQayY7dOshmc357u50WW1umTQC3EbPrlqMa0Sf/OB"
    "4T7NodC7ocs6dcmgK6CGEdxSwe9Aarm2OgYdT5cM2i93kRKHtq462h6VOBrIqBn0vLXaPuEhoba7"
    "etrqHBLG0SWDrvjQouSv9r4SQ0D5H8w9XVarSwZd+a/2JsGgyiN6JvwpfeF3sabLanXJoANQqv3n"
    "VDjImfFjPrqyB2F0may3n0Evc6KcLYvWdrdcW913x7xpL+ChN4POGwwlDeJmeOWPoZRbZT+QdBfQ"
    "pBn0srsFVolMQtvdMiWm7/440lwdumTQgZi7C2Jf2We2bYJlOzfoMnh3EoPO/1n10WJgN9JW90GX"
    "ub8IGXT+YNgW/ltaHl6p+VnTWUCTZtBttPrUmtVpqyv3tUJjAVvwGHRdzNU0X2tdNBO11/vpqz5d"
    "MuiAk01znSDX2Fmgra7cpzd9BdyBzqDr3BHQSm+uoZRyP360FfDSZAZdJ30CI2ml7S7K1CZdBdw7"
    "w6Dr3V071yfVR/asozDnIAewdBWwdBfRoOd8IJuhdelQuPPhEceZ/sbSG9Yyt91tA2VwdFm3Lhn0"
    "P9Ztd8P45xLBMFeJoGSQXxMbdMm4uNBlel0y6BezpdIBcUmS+e0SmvMu2JcIXQacmGXQ/9bveuvi"
    "lwhK74zO1Ha36ura9UyXeXTJoN90cn8N/mu97rTdRWmrW9NlM7pk0G/MokploRtGU1VbXcQfNroM"
    "OGHIoGOUCk4+1Zvc9fzO0hBdBoxnBh0nGOaq4UY77GqprW5Hl83qkkEHa7naB/63Z9kZHbk9kS4D"
    "LgZj0HF2XVwTZYZ9QHOOPuBDlwH7/Bl0LKOb85AtyshyC7uez3RJlww6Xt1rzs+pKEt/srfVzSV4"
    "ugyoSwYd65PqmsiIouyMzrKmlS4D6lIgxDO6VSIzOjWeeZX80aLLgLoUCPGMbu4Dtn2Cz3lXhdFl"
    "Cl0KhHi/1iXWHdZ8+WnWtrq5D07pMqAuBUK87KuEoZVuu6txeCXbM6DLgLoUCDEzMNmjrwi6bECX"
    "AiFmPXfTqb+qw9Nlel0KhJgmV2oSL0sHg04WugypS4EQ81P5kNSsahheydoLTpcBdSkQ5uccOOvK"
    "MkVnmpIuQ+pSIMQ0uEuX98DsnEy0tRyM0mVAXQqEmO1apQ06+iY3G/3oMqQuBULMQLglH9q4LvD3"
    "Zd+JTZcBdSkQyhy0ZXgOkW8TcasMXYbUpUCIK47si4PeeR/fV0Jt4V5GugyoS4EgEJ7tcsjWdle6"
    "rW7NoOmSQQsEhtbmDw5dMmiB0LBBZyoJZCzZ0CWDFggNHhJmO1TLfOhJlw4JBUJjbXbZ2tKytw3S"
    "pTY7gdDIoEq2wY4WBm/o0qCKQGhk1DvbaHQro+t0adRbICxgYrVcthpxuVBLy5/o0rIkgbBAtnZI"
    "nonMtZ6zxfWpdGndqEAonGH2Ff2NkRbct3gBAV1a2C8QunxXXmW7Iqp0OWbfQM8vXbryyuWUQZ5B"
    "7Zestn4JLl0G1KVAiPcZdan07y3ddrdN8m9j0HTJoBMdnh0bzExezVJrz+4ZNF0y6CQHZ32D2ckr"
    "dd4I9XEGTZcMOknr2aryv72mTolIHSYMmi4ZdPBf6Wvjf/+zvaeRerQZNF0y6OAZ5F6m8u2yQsQp"
    "RwZNlww6cCfDuotzGLP0vouoe0IYNF0y6ICf9tdA5rz0xrjIm/YYNF0y6BmYez/yPphBL7lzOfqu"
    "arqkSwYdrHNhFdCgl7i1JMNtL3RJlww6UBCcAprzEm13H12e+xLpki4Z9Iu1rVLmswls0OvCbXdZ"
    "bhynS7pk0C+YTqk65yWwOS/Vdqetji5T6FIg/NuqwpIZ4TaBQa8Klx5KlFJWDJouGXQ9gbAt3B2Q"
    "JXse2SUy6F3A50+XAXUpEL7O/HYLBEDEwZQaWp5Kt/MxaLpk0AUDYTP8Ih8K9/BGWysape1OyYku"
    "Q+syYiC0QO2Ld17hHPi9nAM/d7oKqEuBUCd9UnNeYomRkhNdhtWlQJClabvL2VZHlwl0KRC0b7Ww"
    "M1rJibZC6lIg1MWmAXNe6iqq1hZV0WUCXQoEvbWt7IzOvOuZLpPqUiDUwalBc47Sdrdl0HTJoAVB"
    "q1wqfjeZJjlpLaAuBQID0HbXxiQnvQXUpUBYdmR4xaCL74xu9cuG5gLqUiAQv7a7NiY56S6gLgWC"
    "IDC8km8ohS6T6FIgaKXTdpezrY4uE+hSIJQT/YYBf0lfwbvqGTRdMui2ZvgdBsZou8vcVUOLAXUp"
    "EOb9de4ZbqjhlS2DpksGnX9n7EHWHK7tLvvhLV0G1KVAeL/I1wz2LcMrt8LiXTNoumTQfplRX9vd"
    "oYHnSZcMuqlAOGubm314pUTbXSs7uOmSQacOhI/hU2knWy7GTm86XbasS4HweBb/Mrz0w3Cyr668"
    "HNeZ3/UPBk2XLRk0EKXtbuv5gkEDr3GeqVbp2YJBA5W13bXQVgcGDYQ8MNR9AwYNVGjSzBkMGpjR"
    "pP+l3HFjzmDQQJma9DP7Oozgg0EDCxj1fuiPvd1ly5fhv2PMYNAAAAYNAAwaAMCgAQAMGgAYNACA"
    "QQMAgwYAMGgAYNAAAAaNJOPV2wfsuv9fRfQZlydY6lqlZ/6Nf/tbd588I2PnYND4lrHeG+rpgQnd"
    "unZug16K24PnfvrC8Bk9g0YQs50a7bGSTBTLZf7HT4ydqTNovMgj0x2Fd2VE6N57Q/blEzOnRQbd"
    "FKtJ8I+COA8C+WAYqJSPIUbPk7gd43hF1ww6Wvbb35UaZL1oJRsfSyu9LJxBL2nCu7sMmEiBv9fH"
    "z3dlFF7CoF8+gJtmwroZgHm6V46T0omDTAb9R114PzFiwgHqyLqPgzabrne3ZsZjacLBHBDvwPI8"
    "ybZXDDp2rZgZA22ZNoOutGa8Gz6JdE0AukqOgyesGfRyhnySHQP4RpZ9imrYUerH/fCryJABvGrY"
    "x8FTVgz637Pk/VBfElQA5uI8eM2aQX/PlNWRASxVv67KrGsoXzBlALWa9apFg+6VLwAEKoP02Q16"
    "zJYd9AGIesBYNKsuZcyHzj4LAHn2iBxKGDVjBoBKjXrOGrNSBp5dkHPp/ryP79Hlq6/eWDPls3sZ"
    "vRM8U/roIxj0yuEf/nIqfhmMcNxStgkwKLXp/tt6OF5BpusInx0mrmo16I2sGd2f+xAyL2gfL3Cw"
    "BwbTbHpTm0Fv1JqNz0YZn+2sJcD8telNLQbNnNsNwmOQMsWS5ZEjfTDpJQ3ap1172fKO+T7NTlbd"
    "ZKlvUYPeeQlNcWq8hPGOEshJHDXFbkmDlj23Zc5M9j0waVl0EYP2AtpB5vzeTFpMtQODBoNm0GDQ"
    "ShxKHFDiQIgSh0NCh4RwSIhKDwll0drsoM0OlbbZGVQxqGJQxaAKKh5UYdIw6m3UG5WOeluWBMuS"
    "lPpQ8bIk60Zh3SisG6143aiF/XiFS2dhP+JmzSEW9rvyCkBLteaQV14xagCMOYBBT416r/QBIHAp"
    "Y1+yU2mpg5feYSKAQId//RJeWUPf6N6pOIAKu46KZss1GvSUNbMGUIEpr2vxxVp7T0ezVgYBMHf5"
    "oipTjmDQxmcBNL+WIOJ47XoYrz0xbADfMOTT4BnraH6XYR/CaNj2IQCY7oFZR/e3zEtsDkN9SZYN"
    "5M2Oz91/KwHSeVlLayCZNpDHjJtYa9v69UPjlrLfn0QW5AD1LM46dv9tPWx2x7hbLx7XtMdsezRu"
    "e0SA9++zGI14zIrX/IdBv2NB+1gqkXUDX2fDY2ki+wUODLpy8+7vMm9dJWiha2KaCfdMmEFHrXdP"
    "F8SPGbgDS9R8MDfNgKcXKKzomkG3mIVPyyjjFUuyccyR9V4mcbbrXr+xBgwak4PMezM/ToSnPt5W"
    "nfdyV2q4N10HcAwaQUz93tjv7+O76F4p3s0w5XT3bnZ3747ZMmjgW0b/meHfc3mCGjLRr/jb37r7"
    "5BkxVjBoAGDQAAAGDQAMGgDAoAEADBoAGDQA4D38D1CqPJ67TYZAAAAAAElFTkSuQmCC"
)
